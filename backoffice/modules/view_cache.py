"""
View Cache and Invalidation

Derived views such as the admin dashboard are served from cached
snapshots. Mutators mark the views of the entity they touched as stale
through the ViewInvalidator, so the next read loads current data.
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger("backoffice.views")

ADMIN_VIEW = "/admin"
STAFF_VIEW = "/dashboard/staff"
ENTREPRENEUR_ORDERS_VIEW = "/dashboard/entrepreneur/orders"
BUYER_ORDERS_VIEW = "/marketplace/orders"
ADMIN_MARKETPLACE_VIEW = "/dashboard/admin/marketplace"

DEFAULT_VIEW_REGISTRY: Dict[str, Tuple[str, ...]] = {
    "profile": (ADMIN_VIEW, STAFF_VIEW),
    "verification_report": (ADMIN_VIEW, STAFF_VIEW),
    "order": (ENTREPRENEUR_ORDERS_VIEW, BUYER_ORDERS_VIEW, ADMIN_MARKETPLACE_VIEW),
}

DEFAULT_VARIANT = "default"


@dataclass(frozen=True)
class InvalidationSignal:
    """Freshness signal for one view path."""
    path: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None


class ViewCache:
    """
    Snapshot store keyed by view path and variant (e.g. one per principal).

    Each path carries a generation counter. A load that started before an
    invalidation of its path is handed back to its caller but not stored.
    """

    def __init__(self):
        self._snapshots: Dict[str, Dict[str, Any]] = {}
        self._generations: Dict[str, int] = {}

    def generation(self, path: str) -> int:
        return self._generations.get(path, 0)

    def is_fresh(self, path: str, variant: str = DEFAULT_VARIANT) -> bool:
        return variant in self._snapshots.get(path, {})

    async def get_or_load(
        self,
        path: str,
        loader: Callable[[], Awaitable[Any]],
        variant: str = DEFAULT_VARIANT,
    ) -> Any:
        """Return the cached snapshot, loading it when missing or stale."""
        variants = self._snapshots.get(path)
        if variants is not None and variant in variants:
            return variants[variant]

        started_at = self.generation(path)
        value = await loader()
        if self.generation(path) == started_at:
            self._snapshots.setdefault(path, {})[variant] = value
        else:
            logger.debug(f"[ViewCache.get_or_load] {path} invalidated during load; not caching")
        return value

    def mark_stale(self, path: str) -> bool:
        """
        Drop every variant of ``path``. Returns True if anything was cached.

        Always bumps the generation so in-flight loads are not stored.
        """
        self._generations[path] = self.generation(path) + 1
        dropped = self._snapshots.pop(path, None)
        return bool(dropped)


class ViewInvalidator:
    """
    Marks cached views stale after a mutation.

    Call sites name the entity they changed; the registry decides which view
    paths depend on that entity type, so one entity can back several views.
    """

    def __init__(
        self,
        cache: Optional[ViewCache] = None,
        registry: Optional[Dict[str, Iterable[str]]] = None,
    ):
        self.cache = cache or ViewCache()
        self._registry: Dict[str, List[str]] = {}
        self._listeners: List[Callable[[InvalidationSignal], None]] = []
        for entity_type, paths in (registry if registry is not None else DEFAULT_VIEW_REGISTRY).items():
            self.register(entity_type, *paths)

    def register(self, entity_type: str, *paths: str) -> None:
        """Declare that ``paths`` render data of ``entity_type``."""
        registered = self._registry.setdefault(entity_type, [])
        for path in paths:
            if path not in registered:
                registered.append(path)

    def views_for(self, entity_type: str) -> Tuple[str, ...]:
        return tuple(self._registry.get(entity_type, ()))

    def add_listener(self, listener: Callable[[InvalidationSignal], None]) -> None:
        self._listeners.append(listener)

    def invalidate(
        self,
        path: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> None:
        """Mark ``path`` stale. Invalidating an already stale path is harmless."""
        had_snapshot = self.cache.mark_stale(path)
        logger.debug(f"[ViewInvalidator.invalidate] path={path} had_snapshot={had_snapshot}")

        signal = InvalidationSignal(path=path, entity_type=entity_type, entity_id=entity_id)
        for listener in list(self._listeners):
            try:
                listener(signal)
            except Exception as e:
                # The write is already committed at this point.
                logger.error(f"[ViewInvalidator.invalidate] listener failed for {path}: {e}", exc_info=True)

    def invalidate_entity(self, entity_type: str, entity_id: Optional[str] = None) -> Tuple[str, ...]:
        """Invalidate every view registered for ``entity_type``, once each."""
        paths = self.views_for(entity_type)
        if not paths:
            logger.warning(f"[ViewInvalidator.invalidate_entity] no views registered for {entity_type}")
        for path in paths:
            self.invalidate(path, entity_type=entity_type, entity_id=entity_id)
        return paths
