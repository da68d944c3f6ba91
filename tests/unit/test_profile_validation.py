"""Unit tests for the profile finalization check"""

from finhealth_gateway.domain.models import FinancialProfile, PersonalInfo
from finhealth_gateway.domain.profile_validation import (
    assess_profile,
    completeness_score,
    find_missing_fields,
    profile_recommendations,
)


def test_assess_complete_profile(make_profile):
    """Test a fully collected profile passes with no tips"""
    profile = make_profile(
        incomes=[5000],
        expenses=[("Housing", 2000)],
        savings=[("Emergency Fund", 9000)],
        goals=[("Trip", "short-term"), ("House", "long-term")],
        risk_tolerance="low",
    )

    assessment = assess_profile(profile)

    assert assessment.is_valid is True
    assert assessment.missing_fields == []
    assert assessment.recommendations == []
    # 10 of 11 fields populated: only the debts list is empty
    assert assessment.completeness_score == 91


def test_assess_empty_profile(make_profile):
    """Test empty sections are reported missing and lower the score"""
    assessment = assess_profile(make_profile())

    assert assessment.is_valid is False
    assert assessment.missing_fields == ["incomes", "expenses", "riskTolerance"]
    assert assessment.completeness_score == 45  # 5 of 11
    assert assessment.recommendations == [
        "Consider setting specific short-term financial goals",
        "Establish long-term financial goals for better planning",
    ]


def test_missing_name():
    """Test a blank name is flagged"""
    profile = FinancialProfile(personal_info=PersonalInfo(name="  ", age=30))

    assert "personalInfo.name" in find_missing_fields(profile)


def test_completeness_counts_zero_as_missing():
    """Test zero and empty values do not count as populated"""
    profile = FinancialProfile(personal_info=PersonalInfo(name="Kim", age=0))

    # personal_info + name of 11 fields
    assert completeness_score(profile) == 18


def test_recommendations_for_overspending(make_profile):
    """Test expenses near income and non-emergency savings produce tips"""
    profile = make_profile(
        incomes=[3000],
        expenses=[2900],
        savings=[("Checking", 20000)],
        goals=[("Car", "short-term"), ("Retirement", "long-term")],
    )

    assert profile_recommendations(profile) == [
        "Consider reducing expenses as they are close to or exceed income",
        "Build emergency fund to cover 3-6 months of expenses",
    ]
