"""Pydantic schemas for API request/response validation"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from loan_gateway.domain.models import (
    EligibilityAssessment,
    EmploymentStatus,
    FinancialProfile,
    LoanRequest,
    PaymentScheduleEntry,
    PersonalProfile,
    RateQuote,
)
from loan_gateway.domain.products import LoanProduct, product_for_purpose


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Requests


class PersonalInfo(CamelModel):
    age: int = Field(..., ge=18, le=65, description="Applicant age in years")
    employment_status: EmploymentStatus
    employment_duration: int = Field(..., ge=3, description="Months in current employment")


class FinancialInfo(CamelModel):
    monthly_income: float = Field(..., ge=5000, description="Gross monthly income")
    monthly_expenses: float = Field(..., ge=0)
    existing_debt: float = Field(..., ge=0, description="Existing monthly debt repayments")
    credit_score: Optional[int] = Field(None, ge=300, le=850)


class LoanDetails(CamelModel):
    requested_amount: float = Field(..., gt=0)
    loan_term: int = Field(..., gt=0, description="Loan term in months")
    loan_purpose: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_product_bounds(self) -> "LoanDetails":
        """Amount and term must fall within the bounds of the product the purpose selects"""
        product = product_for_purpose(self.loan_purpose)
        if not product.accepts_amount(self.requested_amount):
            raise ValueError(
                f"{product.name} amount must be between {product.min_amount:,.0f} and {product.max_amount:,.0f}"
            )
        if not product.accepts_term(self.loan_term):
            raise ValueError(
                f"{product.name} term must be between {product.min_term} and {product.max_term} months"
            )
        return self


class EligibilityRequest(CamelModel):
    """Request body for POST /eligibility"""

    personal_info: PersonalInfo
    financial_info: FinancialInfo
    loan_details: LoanDetails

    def to_domain(self) -> Tuple[PersonalProfile, FinancialProfile, LoanRequest]:
        return (
            PersonalProfile(
                age=self.personal_info.age,
                employment_status=self.personal_info.employment_status,
                employment_duration_months=self.personal_info.employment_duration,
            ),
            FinancialProfile(
                monthly_income=self.financial_info.monthly_income,
                monthly_expenses=self.financial_info.monthly_expenses,
                existing_monthly_debt=self.financial_info.existing_debt,
                credit_score=self.financial_info.credit_score,
            ),
            LoanRequest(
                requested_amount=self.loan_details.requested_amount,
                term_months=self.loan_details.loan_term,
                purpose=self.loan_details.loan_purpose,
            ),
        )


class RateCalculationRequest(CamelModel):
    """Request body for POST /calculate-rate"""

    loan_amount: float = Field(..., ge=5000, le=1500000)
    loan_term: int = Field(..., ge=6, le=72, description="Loan term in months")
    credit_score: Optional[int] = Field(None, ge=300, le=850)
    loan_type: str


# Responses


class EligibilityResult(CamelModel):
    is_eligible: bool
    approval_likelihood: int
    risk_category: str
    decision_reason: str


class RecommendedLoan(CamelModel):
    max_amount: float
    recommended_amount: float
    interest_rate: float
    monthly_payment: float
    total_repayment: float


class AffordabilitySchema(CamelModel):
    disposable_income: float
    debt_to_income_ratio: float
    loan_to_income_ratio: float
    affordability_score: str


class EligibilityResponse(CamelModel):
    """Response for POST /eligibility"""

    eligibility_result: EligibilityResult
    recommended_loan: RecommendedLoan
    affordability_analysis: AffordabilitySchema

    @classmethod
    def from_assessment(cls, assessment: EligibilityAssessment) -> "EligibilityResponse":
        verdict, offer, affordability = assessment.verdict, assessment.offer, assessment.affordability
        return cls(
            eligibility_result=EligibilityResult(
                is_eligible=verdict.is_eligible,
                approval_likelihood=verdict.approval_likelihood,
                risk_category=verdict.risk_category.value,
                decision_reason=verdict.decision_reason.value,
            ),
            recommended_loan=RecommendedLoan(
                max_amount=offer.max_amount,
                recommended_amount=offer.recommended_amount,
                interest_rate=offer.interest_rate,
                monthly_payment=offer.monthly_payment,
                total_repayment=offer.total_repayment,
            ),
            affordability_analysis=AffordabilitySchema(
                disposable_income=affordability.disposable_income,
                debt_to_income_ratio=affordability.debt_to_income_ratio,
                loan_to_income_ratio=affordability.loan_to_income_ratio,
                affordability_score=affordability.affordability_score.value,
            ),
        )


class PaymentScheduleItem(CamelModel):
    """Single month in an amortization schedule"""

    month: int
    payment: float
    principal: float
    interest: float
    balance: float

    @classmethod
    def from_entry(cls, entry: PaymentScheduleEntry) -> "PaymentScheduleItem":
        return cls(
            month=entry.month,
            payment=entry.payment,
            principal=entry.principal_portion,
            interest=entry.interest_portion,
            balance=entry.remaining_balance,
        )


class RateCalculationResponse(CamelModel):
    """Response for POST /calculate-rate"""

    interest_rate: float
    monthly_payment: float
    total_interest: float
    total_repayment: float
    payment_schedule: List[PaymentScheduleItem]

    @classmethod
    def from_quote(cls, quote: RateQuote) -> "RateCalculationResponse":
        return cls(
            interest_rate=quote.interest_rate,
            monthly_payment=quote.monthly_payment,
            total_interest=quote.total_interest,
            total_repayment=quote.total_repayment,
            payment_schedule=[PaymentScheduleItem.from_entry(entry) for entry in quote.schedule],
        )


class InterestRateRange(BaseModel):
    min: float
    max: float


class LoanProductSchema(CamelModel):
    """Loan product as listed by GET /products"""

    id: str
    name: str
    description: str
    min_amount: float
    max_amount: float
    min_term: int
    max_term: int
    interest_rate_range: InterestRateRange
    purposes: List[str]

    @classmethod
    def from_product(cls, product: LoanProduct) -> "LoanProductSchema":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            min_amount=product.min_amount,
            max_amount=product.max_amount,
            min_term=product.min_term,
            max_term=product.max_term,
            interest_rate_range=InterestRateRange(min=product.min_rate, max=product.max_rate),
            purposes=list(product.purposes),
        )


class ProductsResponse(BaseModel):
    """Response for GET /products"""

    products: List[LoanProductSchema]
