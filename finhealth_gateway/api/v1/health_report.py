"""POST /v1/financial-health - financial health report endpoint"""

import logging
import time
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from finhealth_gateway.api.dependencies import get_clock, get_narrative_client, get_request_id
from finhealth_gateway.api.errors import incomplete_profile_response
from finhealth_gateway.api.v1.schemas import (
    ErrorResponse,
    FinancialHealthReportSchema,
    FinancialHealthRequest,
    FinancialHealthResponse,
)
from finhealth_gateway.config import settings
from finhealth_gateway.domain.exceptions import IncompleteProfileError, NarrativeServiceError
from finhealth_gateway.domain.health import generate_financial_health_report
from finhealth_gateway.domain.models import FinancialHealthReport
from finhealth_gateway.domain.narrative import render_narrative
from finhealth_gateway.infrastructure.clients.narrative import NarrativeClient
from finhealth_gateway.infrastructure.observability.logging import log_report
from finhealth_gateway.infrastructure.observability.metrics import (
    narrative_fallback_counter,
    record_report,
)
from finhealth_gateway.utils.clock import Clock

router = APIRouter()


async def build_narrative(
    report: FinancialHealthReport,
    report_schema: FinancialHealthReportSchema,
    narrative_client: NarrativeClient,
    request_id: str,
) -> str:
    """Prefer the external narrative service, fall back to the local template"""
    if narrative_client.enabled:
        try:
            return await narrative_client.generate(report_schema.model_dump(mode="json", by_alias=True))
        except NarrativeServiceError as e:
            narrative_fallback_counter.inc()
            logging.warning(f"Narrative service failed, using template: {e}", extra={"request_id": request_id})

    return render_narrative(report)


@router.post(
    "/financial-health",
    response_model=FinancialHealthResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_health_report(
    request: Request,
    request_body: Optional[FinancialHealthRequest] = Body(default=None),
    narrative_client: NarrativeClient = Depends(get_narrative_client),
    clock: Clock = Depends(get_clock),
):
    """
    Compute a financial health report for a collected profile.

    Flow:
    1. Check required profile sections (400 if any is missing)
    2. Compute score, metrics, recommendations and projections
    3. Attach a narrative (external service or local template)
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        if request_body is None or request_body.profile_data is None:
            raise IncompleteProfileError(["profileData"])
        profile = request_body.profile_data.to_domain()

        report = generate_financial_health_report(profile, clock=clock)
        report_schema = FinancialHealthReportSchema.model_validate(asdict(report))

        narrative = None
        if settings.narrative_enabled:
            narrative = await build_narrative(report, report_schema, narrative_client, request_id)

        duration_ms = (time.time() - start_time) * 1000
        record_report(
            report.health_score.overall,
            report.health_score.grade,
            [rec.id for rec in report.recommendations],
        )
        log_report(
            request_id,
            request_body.user_id,
            request_body.session_id,
            report.health_score.overall,
            report.health_score.grade,
            len(report.recommendations),
            duration_ms,
        )

        return FinancialHealthResponse(
            report=report_schema,
            narrative=narrative,
            generated_at=report.generated_at,
            user_id=request_body.user_id,
            session_id=request_body.session_id,
        )

    except IncompleteProfileError as e:
        return incomplete_profile_response(e, request_id)

    except Exception as e:
        logging.error(f"Unexpected error generating report: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate financial health report", "details": str(e)},
        )
