"""POST /v1/financial-profile/validate - profile finalization check"""

from typing import Optional

from fastapi import APIRouter, Body, Request

from finhealth_gateway.api.dependencies import get_request_id
from finhealth_gateway.api.errors import incomplete_profile_response
from finhealth_gateway.api.v1.schemas import ErrorResponse, ProfileAssessmentResponse, ProfileValidationRequest
from finhealth_gateway.domain.exceptions import IncompleteProfileError
from finhealth_gateway.domain.profile_validation import assess_profile

router = APIRouter()


@router.post(
    "/financial-profile/validate",
    response_model=ProfileAssessmentResponse,
    responses={400: {"model": ErrorResponse}},
)
def validate_profile(request: Request, request_body: Optional[ProfileValidationRequest] = Body(default=None)):
    """
    Check a finished profile before it is scored.

    Returns:
        Completeness score, missing fields and profile-level tips
    """
    try:
        if request_body is None or request_body.profile_data is None:
            raise IncompleteProfileError(["profileData"])
        profile = request_body.profile_data.to_domain()
    except IncompleteProfileError as e:
        return incomplete_profile_response(e, get_request_id(request))

    assessment = assess_profile(profile)

    return ProfileAssessmentResponse(
        is_valid=assessment.is_valid,
        completeness_score=assessment.completeness_score,
        missing_fields=assessment.missing_fields,
        recommendations=assessment.recommendations,
    )
