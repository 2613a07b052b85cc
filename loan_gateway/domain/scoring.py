"""Eligibility engine - core business logic for loan decisions"""

import math
from typing import List, Tuple

from loan_gateway.domain.exceptions import IncomeNotPositiveError
from loan_gateway.domain.models import (
    AffordabilityAnalysis,
    AffordabilityScore,
    DecisionRationale,
    EligibilityAssessment,
    EligibilityVerdict,
    EmploymentStatus,
    FinancialProfile,
    LoanOffer,
    LoanRequest,
    PersonalProfile,
    RiskCategory,
)
from loan_gateway.domain.pricing import amortized_payment, rate_for_credit_tier, round_half_up, round_money

MIN_AGE = 18
MAX_AGE = 65
PAYMENT_COVERAGE_MULTIPLIER = 1.2
MAX_DEBT_TO_INCOME_RATIO = 40.0

# Capacity cap: 35% of disposable income serviced over 48 months
CAPACITY_PAYMENT_SHARE = 0.35
CAPACITY_TERM_MONTHS = 48
PERSONAL_LOAN_CAP = 300_000
VEHICLE_LOAN_CAP = 1_500_000

BASE_LIKELIHOOD = 50

# (threshold, adjustment) tables, evaluated top-down, first match wins
CREDIT_SCORE_ADJUSTMENTS: List[Tuple[int, int]] = [(750, 20), (700, 15), (650, 10), (600, 5)]
CREDIT_SCORE_FALLBACK = -10

DEBT_RATIO_ADJUSTMENTS: List[Tuple[float, int]] = [(20, 15), (30, 10), (40, 5)]
DEBT_RATIO_FALLBACK = -15

PAYMENT_RATIO_ADJUSTMENTS: List[Tuple[float, int]] = [(30, 10), (40, 5)]
PAYMENT_RATIO_FALLBACK = -10

EMPLOYMENT_ADJUSTMENTS = {
    EmploymentStatus.EMPLOYED: 10,
    EmploymentStatus.SELF_EMPLOYED: 5,
}

# (min credit score, debt-to-income below, category)
RISK_RULES: List[Tuple[int, float, RiskCategory]] = [
    (700, 25, RiskCategory.LOW),
    (650, 35, RiskCategory.MEDIUM),
]

# (payment ratio below, debt-to-income below, band)
AFFORDABILITY_RULES: List[Tuple[float, float, AffordabilityScore]] = [
    (25, 20, AffordabilityScore.EXCELLENT),
    (35, 30, AffordabilityScore.GOOD),
    (45, 40, AffordabilityScore.FAIR),
]


def _at_least(value: float, table: List[Tuple[float, int]], fallback: int) -> int:
    for threshold, adjustment in table:
        if value >= threshold:
            return adjustment
    return fallback


def _below(value: float, table: List[Tuple[float, int]], fallback: int) -> int:
    for threshold, adjustment in table:
        if value < threshold:
            return adjustment
    return fallback


def payment_to_income_ratio(monthly_payment: float, disposable_income: float) -> float:
    """
    Monthly payment as a percentage of disposable income.

    Zero disposable income means the payment burden is unbounded, reported
    as +inf so that it lands in the worst band of every table.
    """
    if disposable_income == 0:
        return math.inf
    return monthly_payment / disposable_income * 100


def passes_eligibility_gate(
    profile: PersonalProfile,
    disposable_income: float,
    monthly_payment: float,
    debt_to_income_ratio: float,
) -> bool:
    """
    Hard eligibility rules, checked in order:
    - Unemployed applicants are ineligible
    - Age must be within 18-65
    - Disposable income must cover the payment with 20% headroom
    - Existing debt must not exceed 40% of income
    """
    if profile.employment_status == EmploymentStatus.UNEMPLOYED:
        return False
    if profile.age < MIN_AGE or profile.age > MAX_AGE:
        return False
    if disposable_income < monthly_payment * PAYMENT_COVERAGE_MULTIPLIER:
        return False
    if debt_to_income_ratio > MAX_DEBT_TO_INCOME_RATIO:
        return False
    return True


def calculate_approval_likelihood(
    credit_score: int,
    debt_to_income_ratio: float,
    payment_ratio: float,
    employment_status: EmploymentStatus,
) -> int:
    """
    Score approval likelihood from 0 to 100.

    Starts at 50 and adds:
    - Credit score: 750+ +20, 700+ +15, 650+ +10, 600+ +5, else -10
    - Debt-to-income: <20 +15, <30 +10, <40 +5, else -15
    - Payment-to-disposable-income: <30 +10, <40 +5, else -10
    - Employment: employed +10, self-employed +5
    """
    likelihood = BASE_LIKELIHOOD
    likelihood += _at_least(credit_score, CREDIT_SCORE_ADJUSTMENTS, CREDIT_SCORE_FALLBACK)
    likelihood += _below(debt_to_income_ratio, DEBT_RATIO_ADJUSTMENTS, DEBT_RATIO_FALLBACK)
    likelihood += _below(payment_ratio, PAYMENT_RATIO_ADJUSTMENTS, PAYMENT_RATIO_FALLBACK)
    likelihood += EMPLOYMENT_ADJUSTMENTS.get(employment_status, 0)

    return max(0, min(100, likelihood))


def classify_risk(credit_score: int, debt_to_income_ratio: float) -> RiskCategory:
    """Low: 700+ and DTI < 25. Medium: 650+ and DTI < 35. Otherwise high."""
    for min_score, max_ratio, category in RISK_RULES:
        if credit_score >= min_score and debt_to_income_ratio < max_ratio:
            return category
    return RiskCategory.HIGH


def select_decision_rationale(
    is_eligible: bool,
    disposable_income: float,
    debt_to_income_ratio: float,
    credit_score: int,
) -> DecisionRationale:
    """Pick the single reason shown to the applicant"""
    if not is_eligible:
        if disposable_income < 0:
            return DecisionRationale.INSUFFICIENT_DISPOSABLE_INCOME
        if debt_to_income_ratio > MAX_DEBT_TO_INCOME_RATIO:
            return DecisionRationale.DEBT_TO_INCOME_EXCEEDED
        return DecisionRationale.BELOW_MINIMUM_CRITERIA

    if credit_score >= 700 and debt_to_income_ratio < 25:
        return DecisionRationale.EXCELLENT_PROFILE
    if debt_to_income_ratio < 30:
        return DecisionRationale.STRONG_RATIO
    return DecisionRationale.MEETS_BASIC_REQUIREMENTS


def calculate_max_loan_amount(finances: FinancialProfile, loan: LoanRequest) -> float:
    """
    Largest loan the applicant's cash flow supports, capped per product.

    Capacity comes from the financial profile alone (35% of disposable
    income over 48 months) and ignores the requested loan's own payment.
    Vehicle purposes are capped at 1,500,000, everything else at 300,000.
    """
    max_monthly_payment = finances.disposable_income * CAPACITY_PAYMENT_SHARE
    raw_max = max_monthly_payment * CAPACITY_TERM_MONTHS
    product_cap = VEHICLE_LOAN_CAP if loan.is_vehicle_loan else PERSONAL_LOAN_CAP

    return float(round_half_up(min(raw_max, product_cap)))


def classify_affordability(payment_ratio: float, debt_to_income_ratio: float) -> AffordabilityScore:
    for max_payment_ratio, max_debt_ratio, band in AFFORDABILITY_RULES:
        if payment_ratio < max_payment_ratio and debt_to_income_ratio < max_debt_ratio:
            return band
    return AffordabilityScore.POOR


def evaluate_eligibility(
    profile: PersonalProfile,
    finances: FinancialProfile,
    loan: LoanRequest,
) -> EligibilityAssessment:
    """
    Main entry point: evaluate an application and recommend a loan.

    Inputs are expected to be range-validated by the caller. Monthly income
    must be positive, otherwise the income ratios are undefined.

    Raises:
        IncomeNotPositiveError: monthly_income is zero or negative
    """
    if finances.monthly_income <= 0:
        raise IncomeNotPositiveError(
            f"Monthly income must be positive to compute income ratios, got {finances.monthly_income}"
        )

    disposable_income = finances.disposable_income
    debt_to_income_ratio = finances.existing_monthly_debt / finances.monthly_income * 100
    loan_to_income_ratio = loan.requested_amount / (finances.monthly_income * 12) * 100

    credit_score = finances.effective_credit_score
    interest_rate = rate_for_credit_tier(credit_score, loan.term_months)
    monthly_payment = amortized_payment(loan.requested_amount, interest_rate, loan.term_months)
    payment_ratio = payment_to_income_ratio(monthly_payment, disposable_income)

    is_eligible = passes_eligibility_gate(profile, disposable_income, monthly_payment, debt_to_income_ratio)
    verdict = EligibilityVerdict(
        is_eligible=is_eligible,
        approval_likelihood=calculate_approval_likelihood(
            credit_score, debt_to_income_ratio, payment_ratio, profile.employment_status
        ),
        risk_category=classify_risk(credit_score, debt_to_income_ratio),
        decision_reason=select_decision_rationale(
            is_eligible, disposable_income, debt_to_income_ratio, credit_score
        ),
    )

    max_amount = calculate_max_loan_amount(finances, loan)
    offer = LoanOffer(
        max_amount=max_amount,
        recommended_amount=min(loan.requested_amount, max_amount),
        interest_rate=interest_rate,
        monthly_payment=monthly_payment,
        total_repayment=round_money(monthly_payment * loan.term_months),
    )

    affordability = AffordabilityAnalysis(
        disposable_income=round_money(disposable_income),
        debt_to_income_ratio=round_money(debt_to_income_ratio),
        loan_to_income_ratio=round_money(loan_to_income_ratio),
        affordability_score=classify_affordability(
            payment_to_income_ratio(monthly_payment, disposable_income), debt_to_income_ratio
        ),
    )

    return EligibilityAssessment(verdict=verdict, offer=offer, affordability=affordability)
