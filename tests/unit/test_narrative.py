"""Unit tests for the markdown narrative"""

from finhealth_gateway.domain.health import generate_financial_health_report
from finhealth_gateway.domain.narrative import render_narrative


def test_narrative_summarizes_report(make_profile, clock):
    """Test score, metrics, totals and recommendations appear in the summary"""
    profile = make_profile(incomes=[5000], debts=[40000])
    narrative = render_narrative(generate_financial_health_report(profile, clock=clock))

    assert narrative.startswith("### Executive Summary")
    assert "**Financial Health Score**: F (40/100)" in narrative
    assert "Poor financial health - immediate action required" in narrative
    assert "- **Debt-to-Income Ratio**: 66.67%" in narrative
    assert "- **Savings Rate**: 100%" in narrative
    assert "- **Monthly Income**: $5,000" in narrative
    assert "- **Net Worth**: -$40,000" in narrative
    assert "1. **Build Emergency Fund** (high priority)" in narrative
    assert "2. **Reduce Debt Load** (high priority)" in narrative
    assert narrative.rstrip().endswith("improve your financial wellness.")


def test_narrative_without_recommendations(make_profile, clock):
    """Test a healthy report says no action is needed"""
    profile = make_profile(
        incomes=[10000],
        expenses=[("Housing", 1000), ("Food", 1000), ("Transport", 1000)],
        savings=[60000],
    )
    narrative = render_narrative(generate_financial_health_report(profile, clock=clock))

    assert "No immediate action needed" in narrative
    assert "- **Emergency Fund**: 20 months covered" in narrative


def test_narrative_formats_fractional_amounts(make_profile, clock):
    """Test cents are shown with two decimals"""
    profile = make_profile(incomes=[1234.5], expenses=[1000], savings=[5000])
    narrative = render_narrative(generate_financial_health_report(profile, clock=clock))

    assert "- **Monthly Income**: $1,234.50" in narrative
