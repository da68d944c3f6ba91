"""Forward projections of savings, debt and net worth"""

import math

from finhealth_gateway.domain.exceptions import InvalidProfileDataError
from finhealth_gateway.domain.models import Projection, Projections
from finhealth_gateway.utils.numbers import round_to_int

DEBT_PAYMENT_SHARE = 0.3  # Share of monthly savings put towards debt
DEBT_PAYOFF_MONTHS = 24
SAVINGS_GROWTH_RATE = 0.03


def calculate_projections(
    current_savings: float,
    current_debt: float,
    monthly_income: float,
    savings_rate: float,
) -> Projections:
    """
    Project 1-year and 5-year outcomes at a constant savings rate.

    Simplified linear/compound hybrid, not an amortization schedule:
    - monthly savings = income * savings_rate / 100
    - monthly debt payment = min(30% of monthly savings, debt / 24)
    - 1 year:  savings + 12 months of contributions, debt - 12 payments
    - 5 years: 1-year savings grown 3% for 4 years plus 48 more months of
      contributions, debt - 60 payments
    Debt is floored at 0. All values are rounded half-up to whole units.

    Raises:
        InvalidProfileDataError: When a projected balance overflows

    Args:
        savings_rate: Percentage, already floored at 0 by the caller
    """
    monthly_savings = monthly_income * savings_rate / 100
    monthly_debt_payment = min(monthly_savings * DEBT_PAYMENT_SHARE, current_debt / DEBT_PAYOFF_MONTHS)

    one_year_savings = current_savings + monthly_savings * 12
    one_year_debt = max(0.0, current_debt - monthly_debt_payment * 12)

    five_year_savings = one_year_savings * (1 + SAVINGS_GROWTH_RATE) ** 4 + monthly_savings * 48
    five_year_debt = max(0.0, current_debt - monthly_debt_payment * 60)

    if not math.isfinite(one_year_savings) or not math.isfinite(five_year_savings):
        raise InvalidProfileDataError(f"projected savings out of range: {five_year_savings!r}")

    return Projections(
        one_year=Projection(
            net_worth=round_to_int(one_year_savings - one_year_debt),
            savings=round_to_int(one_year_savings),
            debt_reduction=round_to_int(current_debt - one_year_debt),
        ),
        five_year=Projection(
            net_worth=round_to_int(five_year_savings - five_year_debt),
            savings=round_to_int(five_year_savings),
            debt_reduction=round_to_int(current_debt - five_year_debt),
        ),
    )
