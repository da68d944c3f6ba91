"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from finhealth_gateway.domain.exceptions import IncompleteProfileError
from finhealth_gateway.domain.models import (
    Debt,
    Expense,
    FinancialProfile,
    Goal,
    Income,
    PersonalInfo,
    Saving,
)

Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Requests


class PersonalInfoSchema(CamelModel):
    name: str = ""
    age: Optional[int] = None
    location: str = ""
    family_status: str = ""


class IncomeSchema(CamelModel):
    source: str = ""
    amount: Amount
    frequency: str = "monthly"


class ExpenseSchema(CamelModel):
    category: str = "Other"
    amount: Amount


class DebtSchema(CamelModel):
    type: str = ""
    amount: Amount = Field(..., description="Total outstanding balance")


class SavingSchema(CamelModel):
    type: str = ""
    amount: Amount


class GoalSchema(CamelModel):
    title: str = ""
    type: str = ""
    target_amount: Optional[Amount] = None


class ProfileDataSchema(CamelModel):
    """Financial profile as produced by the collection flow"""

    personal_info: Optional[PersonalInfoSchema] = None
    incomes: Optional[List[IncomeSchema]] = None
    expenses: Optional[List[ExpenseSchema]] = None
    debts: Optional[List[DebtSchema]] = None
    savings: Optional[List[SavingSchema]] = None
    goals: Optional[List[GoalSchema]] = None
    risk_tolerance: Optional[str] = None

    def missing_sections(self) -> List[str]:
        """Required sections absent from the payload; goals are optional"""
        required = ["personal_info", "incomes", "expenses", "debts", "savings"]
        return [to_camel(name) for name in required if getattr(self, name) is None]

    def to_domain(self) -> FinancialProfile:
        """
        Convert to the domain profile.

        Raises:
            IncompleteProfileError: When a required section is missing
        """
        missing = self.missing_sections()
        if missing:
            raise IncompleteProfileError(missing)

        info = self.personal_info
        return FinancialProfile(
            personal_info=PersonalInfo(
                name=info.name,
                age=info.age,
                location=info.location,
                family_status=info.family_status,
            ),
            incomes=[Income(source=i.source, amount=i.amount, frequency=i.frequency) for i in self.incomes],
            expenses=[Expense(category=e.category, amount=e.amount) for e in self.expenses],
            debts=[Debt(type=d.type, amount=d.amount) for d in self.debts],
            savings=[Saving(type=s.type, amount=s.amount) for s in self.savings],
            goals=[Goal(title=g.title, type=g.type, target_amount=g.target_amount) for g in self.goals or []],
            risk_tolerance=self.risk_tolerance,
        )


class FinancialHealthRequest(CamelModel):
    """Request body for POST /v1/financial-health"""

    profile_data: Optional[ProfileDataSchema] = None
    user_id: Optional[str] = None
    session_id: Optional[str] = None


class ProfileValidationRequest(CamelModel):
    """Request body for POST /v1/financial-profile/validate"""

    profile_data: Optional[ProfileDataSchema] = None


# Responses


class HealthScoreSchema(CamelModel):
    overall: str
    grade: int
    description: str


class PercentageMetricSchema(CamelModel):
    percentage: float
    status: str
    benchmark: str


class EmergencyFundMetricSchema(CamelModel):
    months_covered: float
    status: str
    benchmark: str
    recommendation: str


class DebtLoadMetricSchema(CamelModel):
    total_debt: float
    status: str
    benchmark: str


class MetricsSchema(CamelModel):
    debt_to_income_ratio: PercentageMetricSchema
    savings_rate: PercentageMetricSchema
    emergency_fund: EmergencyFundMetricSchema
    debt_load: DebtLoadMetricSchema


class ExpenseCategorySchema(CamelModel):
    category: str
    amount: float
    percentage: float


class BreakdownSchema(CamelModel):
    total_monthly_income: float
    total_monthly_expenses: float
    total_debt: float
    total_savings: float
    net_worth: float
    disposable_income: float
    expense_categories: List[ExpenseCategorySchema]


class RecommendationSchema(CamelModel):
    id: str
    priority: str
    category: str
    title: str
    description: str
    impact: str
    timeframe: str
    action_steps: List[str]


class ProjectionSchema(CamelModel):
    net_worth: int
    savings: int
    debt_reduction: int


class ProjectionsSchema(CamelModel):
    one_year: ProjectionSchema
    five_year: ProjectionSchema


class FinancialHealthReportSchema(CamelModel):
    health_score: HealthScoreSchema
    metrics: MetricsSchema
    breakdown: BreakdownSchema
    recommendations: List[RecommendationSchema]
    projections: ProjectionsSchema
    generated_at: datetime


class FinancialHealthResponse(CamelModel):
    """Response for POST /v1/financial-health"""

    success: bool = True
    report: FinancialHealthReportSchema
    narrative: Optional[str] = None
    generated_at: datetime
    user_id: Optional[str] = None
    session_id: Optional[str] = None


class ProfileAssessmentResponse(CamelModel):
    """Response for POST /v1/financial-profile/validate"""

    is_valid: bool
    completeness_score: int
    missing_fields: List[str]
    recommendations: List[str]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    missing: Optional[List[str]] = None
