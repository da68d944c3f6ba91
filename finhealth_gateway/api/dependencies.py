"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from finhealth_gateway.infrastructure.clients.narrative import NarrativeClient
from finhealth_gateway.utils.clock import Clock, utc_now


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_narrative_client() -> NarrativeClient:
    """Provide narrative service client instance"""
    return NarrativeClient()


def get_clock() -> Clock:
    """Provide the time source used to stamp reports"""
    return utc_now
