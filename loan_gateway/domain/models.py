"""Domain models - immutable value records for the loan decision engine"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

DEFAULT_CREDIT_SCORE = 650


class EmploymentStatus(str, Enum):
    EMPLOYED = "employed"
    SELF_EMPLOYED = "self_employed"
    UNEMPLOYED = "unemployed"
    RETIRED = "retired"


class RiskCategory(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AffordabilityScore(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class DecisionRationale(str, Enum):
    """Fixed set of decision reasons; the value is the client-facing message"""

    # Ineligible
    INSUFFICIENT_DISPOSABLE_INCOME = "Insufficient disposable income to support loan repayment"
    DEBT_TO_INCOME_EXCEEDED = "Debt-to-income ratio exceeds acceptable threshold"
    BELOW_MINIMUM_CRITERIA = "Does not meet minimum eligibility criteria"

    # Eligible
    EXCELLENT_PROFILE = "Excellent credit profile with strong income-to-expense ratio"
    STRONG_RATIO = "Strong income-to-expense ratio and manageable existing debt"
    MEETS_BASIC_REQUIREMENTS = "Meets basic eligibility requirements with acceptable risk profile"


@dataclass(frozen=True)
class PersonalProfile:
    """Applicant personal details"""

    age: int
    employment_status: EmploymentStatus
    employment_duration_months: int


@dataclass(frozen=True)
class FinancialProfile:
    """Applicant monthly cash flow and credit standing"""

    monthly_income: float
    monthly_expenses: float
    existing_monthly_debt: float
    credit_score: Optional[int] = None

    @property
    def effective_credit_score(self) -> int:
        """Credit score used for pricing and scoring; unknown scores are treated as 650"""
        return self.credit_score if self.credit_score is not None else DEFAULT_CREDIT_SCORE

    @property
    def disposable_income(self) -> float:
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class LoanRequest:
    """Requested loan terms"""

    requested_amount: float
    term_months: int
    purpose: str

    @property
    def is_vehicle_loan(self) -> bool:
        return "vehicle" in self.purpose


@dataclass(frozen=True)
class EligibilityVerdict:
    """Approve/decline outcome with scoring context"""

    is_eligible: bool
    approval_likelihood: int
    risk_category: RiskCategory
    decision_reason: DecisionRationale


@dataclass(frozen=True)
class LoanOffer:
    """Recommended loan derived from the applicant's capacity"""

    max_amount: float
    recommended_amount: float
    interest_rate: float
    monthly_payment: float
    total_repayment: float


@dataclass(frozen=True)
class AffordabilityAnalysis:
    """Income ratios (percentages) and the resulting affordability band"""

    disposable_income: float
    debt_to_income_ratio: float
    loan_to_income_ratio: float
    affordability_score: AffordabilityScore


@dataclass(frozen=True)
class EligibilityAssessment:
    """Output of eligibility evaluation"""

    verdict: EligibilityVerdict
    offer: LoanOffer
    affordability: AffordabilityAnalysis


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """Single month in an amortization schedule"""

    month: int
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float


@dataclass(frozen=True)
class RateQuote:
    """Output of rate calculation"""

    loan_type: str
    interest_rate: float
    monthly_payment: float
    total_interest: float
    total_repayment: float
    schedule: List[PaymentScheduleEntry]
