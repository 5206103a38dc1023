from fastapi import status
from fastapi.responses import ORJSONResponse

from pagewise.core.result import PaginationResult


def status_for(result: PaginationResult) -> int:
    if result.success:
        return status.HTTP_200_OK
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def page_response(result: PaginationResult) -> ORJSONResponse:
    """Wrap a pagination result as a JSON response (200 on success, else 500)."""
    return ORJSONResponse(
        status_code=status_for(result),
        content=result.to_payload(),
        media_type="application/json",
    )
