"""Error responses shared by the endpoints that accept profileData"""

import logging

from fastapi.responses import JSONResponse

from finhealth_gateway.domain.exceptions import IncompleteProfileError
from finhealth_gateway.infrastructure.observability.metrics import incomplete_profile_counter

MISSING_PROFILE_ERROR = "Financial profile data is required"
INCOMPLETE_PROFILE_ERROR = (
    "Incomplete financial profile. Must include personal info, incomes, expenses, debts, and savings."
)


def incomplete_profile_response(error: IncompleteProfileError, request_id: str) -> JSONResponse:
    """400 with the missing sections; a missing profileData gets its own message"""
    incomplete_profile_counter.inc()
    logging.warning(f"Incomplete profile: {error}", extra={"request_id": request_id})
    message = MISSING_PROFILE_ERROR if error.missing_sections == ["profileData"] else INCOMPLETE_PROFILE_ERROR
    return JSONResponse(status_code=400, content={"error": message, "missing": error.missing_sections})
