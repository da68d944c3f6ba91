"""Profile finalization check run when the collection flow completes"""

from dataclasses import asdict
from typing import Any, List

from finhealth_gateway.domain.models import FinancialProfile, ProfileAssessment
from finhealth_gateway.utils.numbers import round_to_int


def _is_populated(value: Any) -> bool:
    if value is None or value == "" or value == []:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return False
    return True


def completeness_score(profile: FinancialProfile) -> int:
    """
    Percentage of populated fields.

    Counts every top-level section plus, recursively, the fields of nested
    objects (personal info). List sections count once each.
    """
    total = 0
    populated = 0

    def count(fields: dict) -> None:
        nonlocal total, populated
        for value in fields.values():
            total += 1
            if _is_populated(value):
                populated += 1
            if isinstance(value, dict):
                count(value)

    count(asdict(profile))
    return round_to_int(populated / total * 100) if total else 0


def find_missing_fields(profile: FinancialProfile) -> List[str]:
    missing = []
    if not profile.personal_info.name.strip():
        missing.append("personalInfo.name")
    if not profile.incomes:
        missing.append("incomes")
    if not profile.expenses:
        missing.append("expenses")
    if not profile.risk_tolerance:
        missing.append("riskTolerance")
    return missing


def profile_recommendations(profile: FinancialProfile) -> List[str]:
    """Plain-text tips about gaps in the collected profile"""
    monthly_income = sum(income.amount for income in profile.incomes)
    monthly_expenses = sum(expense.amount for expense in profile.expenses)
    emergency_fund = sum(s.amount for s in profile.savings if "emergency" in s.type.lower())
    goal_types = [goal.type.lower() for goal in profile.goals]

    tips = []
    if monthly_expenses > monthly_income * 0.9:
        tips.append("Consider reducing expenses as they are close to or exceed income")
    if emergency_fund < monthly_expenses * 3:
        tips.append("Build emergency fund to cover 3-6 months of expenses")
    if not any("short" in t for t in goal_types):
        tips.append("Consider setting specific short-term financial goals")
    if not any("long" in t for t in goal_types):
        tips.append("Establish long-term financial goals for better planning")
    return tips


def assess_profile(profile: FinancialProfile) -> ProfileAssessment:
    """Score completeness and list missing fields and tips for a finished profile"""
    missing = find_missing_fields(profile)
    return ProfileAssessment(
        is_valid=not missing,
        completeness_score=completeness_score(profile),
        missing_fields=missing,
        recommendations=profile_recommendations(profile),
    )
