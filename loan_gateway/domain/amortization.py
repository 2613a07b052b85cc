"""Amortization schedule generation and rate quotes"""

from typing import Iterator, List, Optional

from loan_gateway.domain.models import DEFAULT_CREDIT_SCORE, PaymentScheduleEntry, RateQuote
from loan_gateway.domain.pricing import amortized_payment, monthly_rate, rate_for_credit_tier, round_money

# Schedules never show more than the first two years
MAX_SCHEDULE_MONTHS = 24


def iter_payment_schedule(
    principal: float,
    annual_rate: float,
    term_months: int,
    monthly_payment: Optional[float] = None,
) -> Iterator[PaymentScheduleEntry]:
    """
    Yield month-by-month amortization entries for a fixed-rate loan.

    Requirements:
    - Length is min(term_months, 24); loans longer than 24 months are not
      shown through to payoff
    - The running balance stays unrounded between months; only the emitted
      fields are rounded to 2 decimals
    - Emitted balance is floored at 0 so rounding drift never shows negative

    Args:
        principal: Amount borrowed
        annual_rate: Annual interest rate in percent
        term_months: Full loan term
        monthly_payment: Payment to apply each month (default: amortized payment)

    Example:
        1000 at 12% over 2 months, payment 600:
        month 1 -> interest 10.00, principal 590.00, balance 410.00
        month 2 -> interest 4.10, principal 595.90, balance 0.00 (floored from -185.90)
    """
    if monthly_payment is None:
        monthly_payment = amortized_payment(principal, annual_rate, term_months)

    rate = monthly_rate(annual_rate)
    balance = principal

    for month in range(1, min(term_months, MAX_SCHEDULE_MONTHS) + 1):
        interest = balance * rate
        principal_portion = monthly_payment - interest
        balance -= principal_portion

        yield PaymentScheduleEntry(
            month=month,
            payment=round_money(monthly_payment),
            principal_portion=round_money(principal_portion),
            interest_portion=round_money(interest),
            remaining_balance=round_money(max(0.0, balance)),
        )


def build_payment_schedule(
    principal: float,
    annual_rate: float,
    term_months: int,
    monthly_payment: Optional[float] = None,
) -> List[PaymentScheduleEntry]:
    """Materialize the amortization schedule as a list"""
    return list(iter_payment_schedule(principal, annual_rate, term_months, monthly_payment))


def calculate_rate_and_schedule(
    amount: float,
    term_months: int,
    credit_score: Optional[int] = None,
    loan_type: str = "personal_loan",
) -> RateQuote:
    """
    Main entry point for rate calculation: price the loan and build its schedule.

    A missing credit score is priced as 650. loan_type is carried through
    to the quote but does not affect pricing.
    """
    if credit_score is None:
        credit_score = DEFAULT_CREDIT_SCORE

    interest_rate = rate_for_credit_tier(credit_score, term_months)
    monthly_payment = amortized_payment(amount, interest_rate, term_months)
    total_repayment = monthly_payment * term_months
    total_interest = total_repayment - amount

    return RateQuote(
        loan_type=loan_type,
        interest_rate=interest_rate,
        monthly_payment=monthly_payment,
        total_interest=round_money(total_interest),
        total_repayment=round_money(total_repayment),
        schedule=build_payment_schedule(amount, interest_rate, term_months, monthly_payment),
    )
