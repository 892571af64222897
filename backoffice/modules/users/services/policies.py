"""
Failure Policies

Read paths fail soft: the failure is logged and replaced with an empty
result. Write paths fail visible: the failure is logged and returned as a
MutationResult carrying the message. Nothing is thrown past a service
entry point and nothing is retried.
"""
import functools
import logging
from enum import Enum
from typing import Any, Callable, Dict

from backoffice.modules.users.domain.results import MutationResult
from backoffice.modules.users.errors import InvalidInputError

logger = logging.getLogger("backoffice.users.policies")


class FailurePolicy(str, Enum):
    FAIL_SOFT = "fail_soft"
    FAIL_VISIBLE = "fail_visible"


OPERATION_POLICIES: Dict[str, FailurePolicy] = {
    # reads
    "search_profiles": FailurePolicy.FAIL_SOFT,
    "resolve_role": FailurePolicy.FAIL_SOFT,
    "list_entrepreneur_orders": FailurePolicy.FAIL_SOFT,
    "load_admin_dashboard": FailurePolicy.FAIL_SOFT,
    # writes
    "update_user_status": FailurePolicy.FAIL_VISIBLE,
    "revert_verification": FailurePolicy.FAIL_VISIBLE,
    "update_verification_status": FailurePolicy.FAIL_VISIBLE,
    "submit_verification_report": FailurePolicy.FAIL_VISIBLE,
    "update_order_status": FailurePolicy.FAIL_VISIBLE,
}


def guarded(operation: str, fallback: Callable[[], Any] = list):
    """
    Apply the registered failure policy of ``operation`` to an async method.

    ``fallback`` builds the empty result of a fail-soft operation; it is
    ignored for fail-visible ones.
    """
    policy = OPERATION_POLICIES[operation]

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except InvalidInputError as e:
                logger.info(f"[{operation}] rejected input: {e}")
                error = e
            except Exception as e:
                logger.error(f"[{operation}] ERROR: {e}", exc_info=True)
                error = e

            if policy is FailurePolicy.FAIL_SOFT:
                return fallback()
            return MutationResult.failed(str(error))

        wrapper.failure_policy = policy
        return wrapper

    return decorator
