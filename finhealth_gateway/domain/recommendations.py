"""Rule-based recommendation generation for health reports"""

from typing import List, Optional

from finhealth_gateway.domain.models import (
    ExpenseCategory,
    FinancialProfile,
    FinancialRatios,
    FinancialTotals,
    Recommendation,
)
from finhealth_gateway.utils.numbers import round_to_int

EXPENSE_SHARE_THRESHOLD = 40  # percent of monthly expenses
LOW_DISPOSABLE_INCOME = 500  # absolute currency units per month


def _highest_expense(categories: List[ExpenseCategory]) -> Optional[ExpenseCategory]:
    # First entry wins ties
    highest = None
    for category in categories:
        if highest is None or category.percentage > highest.percentage:
            highest = category
    return highest


def emergency_fund_recommendation() -> Recommendation:
    return Recommendation(
        id="emergency-fund",
        priority="high",
        category="savings",
        title="Build Emergency Fund",
        description="Your emergency fund covers less than 3 months of expenses. This should be your top priority.",
        impact="High - Protects against financial emergencies",
        timeframe="3-6 months",
        action_steps=[
            "Open a high-yield savings account",
            "Set up automatic transfers of $200-500 monthly",
            "Start with $1,000 mini emergency fund",
            "Gradually build to 3-6 months of expenses",
        ],
    )


def debt_reduction_recommendation() -> Recommendation:
    return Recommendation(
        id="debt-reduction",
        priority="high",
        category="debt",
        title="Reduce Debt Load",
        description="Your debt-to-income ratio is above recommended levels. Focus on debt reduction.",
        impact="High - Improves cash flow and reduces interest payments",
        timeframe="6-24 months",
        action_steps=[
            "List all debts with interest rates",
            "Use debt avalanche method (pay highest interest first)",
            "Consider debt consolidation if beneficial",
            "Avoid taking on new debt",
        ],
    )


def increase_savings_recommendation() -> Recommendation:
    return Recommendation(
        id="increase-savings",
        priority="medium",
        category="savings",
        title="Increase Savings Rate",
        description="Your savings rate is below the recommended 15-20%. Look for ways to save more.",
        impact="Medium - Builds long-term wealth",
        timeframe="3-12 months",
        action_steps=[
            "Track expenses for one month",
            "Identify areas to cut spending",
            "Automate savings transfers",
            "Increase savings by 1% monthly until reaching 20%",
        ],
    )


def optimize_expenses_recommendation(expense: ExpenseCategory) -> Recommendation:
    name = expense.category
    return Recommendation(
        id="optimize-expenses",
        priority="medium",
        category="expenses",
        title=f"Optimize {name} Spending",
        description=(
            f"{name} represents {round_to_int(expense.percentage)}% of your expenses, which may be too high."
        ),
        impact="Medium - Frees up money for savings and debt reduction",
        timeframe="1-3 months",
        action_steps=[
            f"Review all {name.lower()} expenses",
            "Compare prices and look for alternatives",
            "Negotiate better rates where possible",
            "Set a monthly budget limit",
        ],
    )


def increase_income_recommendation() -> Recommendation:
    return Recommendation(
        id="increase-income",
        priority="medium",
        category="income",
        title="Explore Income Opportunities",
        description="Your disposable income is limited. Consider ways to increase earnings.",
        impact="High - Provides more financial flexibility",
        timeframe="3-12 months",
        action_steps=[
            "Evaluate opportunities for promotion or raise",
            "Develop additional skills for career advancement",
            "Consider side hustles or freelance work",
            "Explore passive income opportunities",
        ],
    )


def prioritize_goals_recommendation() -> Recommendation:
    return Recommendation(
        id="prioritize-goals",
        priority="low",
        category="goals",
        title="Prioritize Financial Goals",
        description="Consider prioritizing debt reduction before pursuing short-term goals.",
        impact="Medium - Optimizes financial strategy",
        timeframe="1-6 months",
        action_steps=[
            "List all financial goals with target dates",
            "Calculate total cost of short-term goals",
            "Consider delaying non-essential goals until debt is reduced",
            "Focus on emergency fund and debt reduction first",
        ],
    )


def generate_recommendations(
    profile: FinancialProfile,
    totals: FinancialTotals,
    ratios: FinancialRatios,
    expense_categories: List[ExpenseCategory],
) -> List[Recommendation]:
    """
    Evaluate every rule independently, in priority order.

    Rules (id: trigger):
    - emergency-fund:    less than 3 months of expenses saved
    - debt-reduction:    debt-to-income ratio above 36%
    - increase-savings:  savings rate below 15%
    - optimize-expenses: a single expense category above 40% of expenses
    - increase-income:   disposable income below 500
    - prioritize-goals:  a short-term goal while carrying any debt

    expense_categories must carry unrounded percentages. Returns an empty
    list when nothing fires.
    """
    recommendations: List[Recommendation] = []

    if ratios.emergency_fund_months < 3:
        recommendations.append(emergency_fund_recommendation())

    if ratios.debt_to_income_ratio > 36:
        recommendations.append(debt_reduction_recommendation())

    if ratios.savings_rate < 15:
        recommendations.append(increase_savings_recommendation())

    highest = _highest_expense(expense_categories)
    if highest is not None and highest.percentage > EXPENSE_SHARE_THRESHOLD:
        recommendations.append(optimize_expenses_recommendation(highest))

    if totals.disposable_income < LOW_DISPOSABLE_INCOME:
        recommendations.append(increase_income_recommendation())

    has_short_term_goal = any("short" in goal.type.lower() for goal in profile.goals)
    if has_short_term_goal and totals.total_debt > 0:
        recommendations.append(prioritize_goals_recommendation())

    return recommendations
