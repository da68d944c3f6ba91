"""Domain models - pure Python dataclasses for profiles and health reports"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class PersonalInfo:
    """Informational only, never used in scoring"""

    name: str = ""
    age: Optional[int] = None
    location: str = ""
    family_status: str = ""


@dataclass(frozen=True)
class Income:
    """Income source; amount is treated as monthly whatever the frequency"""

    source: str
    amount: float
    frequency: str = "monthly"


@dataclass(frozen=True)
class Expense:
    category: str
    amount: float


@dataclass(frozen=True)
class Debt:
    """Outstanding debt; amount is the total balance, not a monthly payment"""

    type: str
    amount: float


@dataclass(frozen=True)
class Saving:
    type: str
    amount: float


@dataclass(frozen=True)
class Goal:
    title: str
    type: str  # "short-term", "long-term", free text
    target_amount: Optional[float] = None


@dataclass(frozen=True)
class FinancialProfile:
    """Snapshot of a user's finances as collected by the profile flow"""

    personal_info: PersonalInfo
    incomes: List[Income] = field(default_factory=list)
    expenses: List[Expense] = field(default_factory=list)
    debts: List[Debt] = field(default_factory=list)
    savings: List[Saving] = field(default_factory=list)
    goals: List[Goal] = field(default_factory=list)
    risk_tolerance: Optional[str] = None


@dataclass
class FinancialTotals:
    """Scalar aggregates of the list-valued profile sections"""

    total_monthly_income: float
    total_monthly_expenses: float
    total_debt: float
    total_savings: float
    disposable_income: float
    net_worth: float


@dataclass
class FinancialRatios:
    """Unrounded indicators used for scoring"""

    debt_to_income_ratio: float
    savings_rate: float
    emergency_fund_months: float


@dataclass
class HealthScore:
    overall: str  # Letter grade A-F
    grade: int  # 0-100
    description: str


@dataclass
class PercentageMetric:
    percentage: float
    status: str
    benchmark: str


@dataclass
class EmergencyFundMetric:
    months_covered: float
    status: str
    benchmark: str
    recommendation: str


@dataclass
class DebtLoadMetric:
    total_debt: float
    status: str
    benchmark: str


@dataclass
class HealthMetrics:
    debt_to_income_ratio: PercentageMetric
    savings_rate: PercentageMetric
    emergency_fund: EmergencyFundMetric
    debt_load: DebtLoadMetric


@dataclass
class ExpenseCategory:
    category: str
    amount: float
    percentage: float


@dataclass
class Breakdown:
    total_monthly_income: float
    total_monthly_expenses: float
    total_debt: float
    total_savings: float
    net_worth: float
    disposable_income: float
    expense_categories: List[ExpenseCategory]


@dataclass
class Recommendation:
    """Templated, rule-triggered action item"""

    id: str
    priority: str  # high | medium | low
    category: str  # savings | debt | expenses | income | goals
    title: str
    description: str
    impact: str
    timeframe: str
    action_steps: List[str]


@dataclass
class Projection:
    net_worth: int
    savings: int
    debt_reduction: int


@dataclass
class Projections:
    one_year: Projection
    five_year: Projection


@dataclass
class FinancialHealthReport:
    """Output of the health calculator"""

    health_score: HealthScore
    metrics: HealthMetrics
    breakdown: Breakdown
    recommendations: List[Recommendation]
    projections: Projections
    generated_at: datetime


@dataclass
class ProfileAssessment:
    """Result of the profile finalization check"""

    is_valid: bool
    completeness_score: int
    missing_fields: List[str]
    recommendations: List[str]
