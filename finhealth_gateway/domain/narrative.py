"""Deterministic markdown narrative rendered from a health report"""

from typing import List

from finhealth_gateway.domain.models import FinancialHealthReport, Recommendation


def _money(value: float) -> str:
    sign = "-" if value < 0 else ""
    value = abs(value)
    if float(value).is_integer():
        return f"{sign}${value:,.0f}"
    return f"{sign}${value:,.2f}"


def _number(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _recommendation_lines(recommendations: List[Recommendation]) -> List[str]:
    if not recommendations:
        return ["No immediate action needed - keep following your current plan."]

    lines = []
    for index, rec in enumerate(recommendations, start=1):
        lines.extend(
            [
                f"{index}. **{rec.title}** ({rec.priority} priority)",
                f"   - {rec.description}",
                f"   - Impact: {rec.impact}",
                f"   - Timeframe: {rec.timeframe}",
                f"   - Action Steps: {', '.join(rec.action_steps)}",
            ]
        )
    return lines


def render_narrative(report: FinancialHealthReport) -> str:
    """
    Render a markdown summary of a report.

    Used as the narrative when no external narrative service is configured
    or when that service fails.
    """
    score = report.health_score
    metrics = report.metrics
    breakdown = report.breakdown

    lines = [
        "### Executive Summary",
        "",
        f"**Financial Health Score**: {score.overall} ({score.grade}/100)",
        score.description,
        "",
        "### Key Metrics Analysis",
        "",
        f"- **Debt-to-Income Ratio**: {_number(metrics.debt_to_income_ratio.percentage)}%",
        f"  - Status: {metrics.debt_to_income_ratio.status}",
        f"  - {metrics.debt_to_income_ratio.benchmark}",
        "",
        f"- **Savings Rate**: {_number(metrics.savings_rate.percentage)}%",
        f"  - Status: {metrics.savings_rate.status}",
        f"  - {metrics.savings_rate.benchmark}",
        "",
        f"- **Emergency Fund**: {_number(metrics.emergency_fund.months_covered)} months covered",
        f"  - Status: {metrics.emergency_fund.status}",
        f"  - {metrics.emergency_fund.recommendation}",
        "",
        f"- **Debt Load**: {_money(metrics.debt_load.total_debt)}",
        f"  - Status: {metrics.debt_load.status}",
        f"  - {metrics.debt_load.benchmark}",
        "",
        "### Financial Breakdown",
        "",
        f"- **Monthly Income**: {_money(breakdown.total_monthly_income)}",
        f"- **Monthly Expenses**: {_money(breakdown.total_monthly_expenses)}",
        f"- **Total Debt**: {_money(breakdown.total_debt)}",
        f"- **Total Savings**: {_money(breakdown.total_savings)}",
        f"- **Net Worth**: {_money(breakdown.net_worth)}",
        "",
        "### Priority Recommendations",
        "",
        *_recommendation_lines(report.recommendations),
        "",
        "### Conclusion",
        "",
        "Your financial health analysis has been completed with actionable "
        "recommendations to improve your financial wellness.",
    ]
    return "\n".join(lines)
