"""
Wire form of mutation outcomes.
"""
from fastapi.responses import JSONResponse

from backoffice.modules.users.domain.results import MutationResult


def mutation_response(result: MutationResult) -> JSONResponse:
    """``{"success": true}`` with 200, or ``{"error": msg}`` with 400."""
    return JSONResponse(status_code=200 if result.success else 400, content=result.to_dict())
