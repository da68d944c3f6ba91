"""Financial health calculator - core scoring logic for health reports"""

import math
from typing import Iterable, List

from finhealth_gateway.domain.exceptions import InvalidProfileDataError
from finhealth_gateway.domain.models import (
    Breakdown,
    DebtLoadMetric,
    EmergencyFundMetric,
    ExpenseCategory,
    FinancialHealthReport,
    FinancialProfile,
    FinancialRatios,
    FinancialTotals,
    HealthMetrics,
    HealthScore,
    PercentageMetric,
)
from finhealth_gateway.domain.projections import calculate_projections
from finhealth_gateway.domain.recommendations import generate_recommendations
from finhealth_gateway.utils.clock import Clock, utc_now
from finhealth_gateway.utils.numbers import round_half_up

DEBT_TO_INCOME_BENCHMARK = "Recommended: <36% for total debt, <28% for housing"
SAVINGS_RATE_BENCHMARK = "Recommended: 20% or higher"
EMERGENCY_FUND_BENCHMARK = "Recommended: 3-6 months of expenses"
DEBT_LOAD_BENCHMARK = "Recommended: total debt below 6 months of income"

GRADE_DESCRIPTIONS = {
    "A": "Excellent financial health with strong fundamentals",
    "B": "Good financial health with room for improvement",
    "C": "Fair financial health - focus on key areas",
    "D": "Below average financial health - needs attention",
    "F": "Poor financial health - immediate action required",
}


def _sum_amounts(section: str, entries: Iterable) -> float:
    total = 0.0
    for entry in entries:
        amount = entry.amount
        if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not math.isfinite(amount):
            raise InvalidProfileDataError(f"{section}: amount must be a finite number, got {amount!r}")
        if amount < 0:
            raise InvalidProfileDataError(f"{section}: amount must be non-negative, got {amount!r}")
        total += amount
    return total


def _require_finite(kind: str, **values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidProfileDataError(f"{kind} {name} is out of range: {value!r}")


def aggregate_profile(profile: FinancialProfile) -> FinancialTotals:
    """
    Reduce the list-valued profile sections to scalar totals.

    Income amounts are summed as monthly figures; the frequency field is
    not used for normalization. Empty sections yield 0.

    Raises:
        InvalidProfileDataError: On a negative, NaN or infinite amount, or
            when a total overflows
    """
    income = _sum_amounts("incomes", profile.incomes)
    expenses = _sum_amounts("expenses", profile.expenses)
    debt = _sum_amounts("debts", profile.debts)
    savings = _sum_amounts("savings", profile.savings)

    totals = FinancialTotals(
        total_monthly_income=income,
        total_monthly_expenses=expenses,
        total_debt=debt,
        total_savings=savings,
        disposable_income=income - expenses,
        net_worth=savings - debt,
    )
    _require_finite("total", **vars(totals))
    return totals


def calculate_ratios(totals: FinancialTotals) -> FinancialRatios:
    """
    Derive unrounded indicators; a zero denominator yields a ratio of 0.

    Raises:
        InvalidProfileDataError: When a ratio overflows (e.g. huge debt on a tiny income)
    """
    income = totals.total_monthly_income
    expenses = totals.total_monthly_expenses

    debt_to_income = totals.total_debt / (income * 12) * 100 if income > 0 else 0.0
    savings_rate = totals.disposable_income / income * 100 if income > 0 else 0.0
    emergency_fund_months = totals.total_savings / expenses if expenses > 0 else 0.0

    ratios = FinancialRatios(
        debt_to_income_ratio=debt_to_income,
        savings_rate=savings_rate,
        emergency_fund_months=emergency_fund_months,
    )
    _require_finite("ratio", **vars(ratios))
    return ratios


def expense_breakdown(profile: FinancialProfile, total_monthly_expenses: float) -> List[ExpenseCategory]:
    """Per-entry share of monthly expenses, in profile order (unrounded)"""
    return [
        ExpenseCategory(
            category=expense.category,
            amount=expense.amount,
            percentage=expense.amount / total_monthly_expenses * 100 if total_monthly_expenses > 0 else 0.0,
        )
        for expense in profile.expenses
    ]


def debt_to_income_status(ratio: float) -> str:
    if ratio <= 25:
        return "excellent"
    if ratio <= 36:
        return "good"
    if ratio <= 50:
        return "fair"
    return "poor"


def savings_rate_status(rate: float) -> str:
    if rate >= 20:
        return "excellent"
    if rate >= 15:
        return "good"
    if rate >= 10:
        return "fair"
    if rate >= 0:
        return "poor"
    return "critical"


def emergency_fund_status(months: float) -> str:
    if months >= 6:
        return "excellent"
    if months >= 3:
        return "good"
    if months >= 1:
        return "fair"
    return "poor"


def debt_load_status(total_debt: float, total_monthly_income: float) -> str:
    if total_debt == 0:
        return "excellent"
    if total_debt < total_monthly_income * 6:
        return "manageable"
    return "concerning"


def calculate_health_score(ratios: FinancialRatios, totals: FinancialTotals) -> int:
    """
    Additive points model starting from 100, clamped to [0, 100].

    Adjustments (each category applied independently):
    - Debt-to-income: -30 (>50%), -20 (>36%), -10 (>25%)
    - Savings rate:   -25 (<0%), -20 (<10%), -10 (<15%), +5 (>=20%)
    - Emergency fund: -25 (<1 mo), -15 (<3), -5 (<6), +5 (>=6)
    - Net worth:      -15 when negative
    - Cash flow:      -10 when disposable income is negative, +5 when positive
    """
    score = 100

    dti = ratios.debt_to_income_ratio
    if dti > 50:
        score -= 30
    elif dti > 36:
        score -= 20
    elif dti > 25:
        score -= 10

    rate = ratios.savings_rate
    if rate < 0:
        score -= 25
    elif rate < 10:
        score -= 20
    elif rate < 15:
        score -= 10
    elif rate >= 20:
        score += 5

    months = ratios.emergency_fund_months
    if months < 1:
        score -= 25
    elif months < 3:
        score -= 15
    elif months < 6:
        score -= 5
    else:
        score += 5

    if totals.net_worth < 0:
        score -= 15

    if totals.disposable_income < 0:
        score -= 10
    elif totals.disposable_income > 0:
        score += 5

    return max(0, min(100, score))


def determine_grade(score: int) -> HealthScore:
    """Map a clamped score to its letter grade and fixed description"""
    if score >= 90:
        letter = "A"
    elif score >= 80:
        letter = "B"
    elif score >= 70:
        letter = "C"
    elif score >= 60:
        letter = "D"
    else:
        letter = "F"

    return HealthScore(overall=letter, grade=score, description=GRADE_DESCRIPTIONS[letter])


def build_metrics(ratios: FinancialRatios, totals: FinancialTotals) -> HealthMetrics:
    months = ratios.emergency_fund_months

    return HealthMetrics(
        debt_to_income_ratio=PercentageMetric(
            percentage=round_half_up(ratios.debt_to_income_ratio, 2),
            status=debt_to_income_status(ratios.debt_to_income_ratio),
            benchmark=DEBT_TO_INCOME_BENCHMARK,
        ),
        savings_rate=PercentageMetric(
            percentage=round_half_up(ratios.savings_rate, 2),
            status=savings_rate_status(ratios.savings_rate),
            benchmark=SAVINGS_RATE_BENCHMARK,
        ),
        emergency_fund=EmergencyFundMetric(
            months_covered=round_half_up(months, 2),
            status=emergency_fund_status(months),
            benchmark=EMERGENCY_FUND_BENCHMARK,
            recommendation="Build to 3-6 months of expenses" if months < 3 else "Well funded",
        ),
        debt_load=DebtLoadMetric(
            total_debt=totals.total_debt,
            status=debt_load_status(totals.total_debt, totals.total_monthly_income),
            benchmark=DEBT_LOAD_BENCHMARK,
        ),
    )


def generate_financial_health_report(profile: FinancialProfile, clock: Clock = utc_now) -> FinancialHealthReport:
    """
    Main entry point: compute a complete health report for a profile.

    Pure apart from reading the injected clock for generated_at; a fixed
    clock gives identical reports for identical profiles.
    """
    totals = aggregate_profile(profile)
    ratios = calculate_ratios(totals)
    categories = expense_breakdown(profile, totals.total_monthly_expenses)

    score = calculate_health_score(ratios, totals)
    recommendations = generate_recommendations(profile, totals, ratios, categories)
    projections = calculate_projections(
        current_savings=totals.total_savings,
        current_debt=totals.total_debt,
        monthly_income=totals.total_monthly_income,
        savings_rate=max(0.0, ratios.savings_rate),
    )

    breakdown = Breakdown(
        total_monthly_income=totals.total_monthly_income,
        total_monthly_expenses=totals.total_monthly_expenses,
        total_debt=totals.total_debt,
        total_savings=totals.total_savings,
        net_worth=totals.net_worth,
        disposable_income=totals.disposable_income,
        expense_categories=[
            ExpenseCategory(c.category, c.amount, round_half_up(c.percentage, 2)) for c in categories
        ],
    )

    return FinancialHealthReport(
        health_score=determine_grade(score),
        metrics=build_metrics(ratios, totals),
        breakdown=breakdown,
        recommendations=recommendations,
        projections=projections,
        generated_at=clock(),
    )
