"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from finhealth_gateway.api.dependencies import get_clock, get_narrative_client
from finhealth_gateway.api.main import create_app
from finhealth_gateway.infrastructure.clients.narrative import NarrativeClient
from finhealth_gateway.domain.models import (
    Debt,
    Expense,
    FinancialProfile,
    Goal,
    Income,
    PersonalInfo,
    Saving,
)

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


def _make_profile(
    incomes=(),
    expenses=(),
    debts=(),
    savings=(),
    goals=(),
    risk_tolerance=None,
) -> FinancialProfile:
    """Build a profile from plain numbers/tuples for terse tests"""

    def _pairs(entries, default_label):
        for entry in entries:
            if isinstance(entry, tuple):
                yield entry
            else:
                yield default_label, entry

    return FinancialProfile(
        personal_info=PersonalInfo(name="Alex Doe", age=34, location="Austin, TX", family_status="single"),
        incomes=[Income(source=s, amount=a) for s, a in _pairs(incomes, "Salary")],
        expenses=[Expense(category=c, amount=a) for c, a in _pairs(expenses, "Other")],
        debts=[Debt(type=t, amount=a) for t, a in _pairs(debts, "Loan")],
        savings=[Saving(type=t, amount=a) for t, a in _pairs(savings, "Checking")],
        goals=[Goal(title=title, type=kind) for title, kind in goals],
        risk_tolerance=risk_tolerance,
    )


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def make_profile():
    """Factory for domain profiles"""
    return _make_profile


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client with a fixed clock and no narrative service"""
    app = create_app()
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    app.dependency_overrides[get_narrative_client] = lambda: NarrativeClient(base_url="")
    return TestClient(app)


@pytest.fixture
def profile_payload() -> dict:
    """Request body profile as sent by the collection flow"""
    return {
        "personalInfo": {
            "name": "Jordan Smith",
            "age": 41,
            "location": "Denver, CO",
            "familyStatus": "married",
        },
        "incomes": [
            {"source": "Salary", "amount": 6000, "frequency": "monthly"},
            {"source": "Freelance", "amount": 500, "frequency": "weekly"},
        ],
        "expenses": [
            {"category": "Housing", "amount": 2000},
            {"category": "Food", "amount": 800},
            {"category": "Transportation", "amount": 400},
        ],
        "debts": [
            {"type": "Car Loan", "amount": 12000},
            {"type": "Credit Card", "amount": 3000},
        ],
        "savings": [
            {"type": "Emergency Fund", "amount": 8000},
            {"type": "401k", "amount": 25000},
        ],
        "goals": [
            {"title": "Vacation", "type": "short-term", "targetAmount": 3000},
            {"title": "Retirement", "type": "long-term"},
        ],
        "riskTolerance": "medium",
    }
