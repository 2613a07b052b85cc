"""Interest rate tiers and fixed-rate annuity payment math"""

import math
from decimal import ROUND_HALF_CEILING, ROUND_HALF_UP, Decimal
from typing import List, Tuple

# (minimum credit score, base annual rate %), highest score first
RATE_TIERS: List[Tuple[int, float]] = [
    (750, 10.5),
    (700, 11.5),
    (650, 12.5),
    (600, 14.5),
]
FLOOR_RATE = 16.5

LONG_TERM_THRESHOLD_MONTHS = 36
LONG_TERM_SURCHARGE = 1.0


def round_money(value: float) -> float:
    """
    Round a monetary amount or percentage to 2 decimal places.

    Ties are rounded away from zero on the exact binary value of the float,
    so 12.125 becomes 12.13 rather than the half-to-even 12.12.
    """
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to a whole number with .5 going up (towards +inf)"""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_CEILING))


def rate_for_credit_tier(credit_score: int, term_months: int) -> float:
    """
    Look up the annual interest rate (%) for a credit score and term.

    Tiers are evaluated top-down, first match wins:
    - 750+: 10.5
    - 700+: 11.5
    - 650+: 12.5
    - 600+: 14.5
    - below: 16.5

    Terms longer than 36 months carry a +1.0 surcharge.
    """
    base_rate = FLOOR_RATE
    for min_score, rate in RATE_TIERS:
        if credit_score >= min_score:
            base_rate = rate
            break

    if term_months > LONG_TERM_THRESHOLD_MONTHS:
        base_rate += LONG_TERM_SURCHARGE

    return round_money(base_rate)


def monthly_rate(annual_rate: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate"""
    return annual_rate / 100 / 12


def amortized_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """
    Fixed monthly payment that retires principal plus interest over the term.

        payment = P * (r * (1+r)^n) / ((1+r)^n - 1),  r = annual_rate / 100 / 12

    A zero rate makes the formula 0/0, so the payment falls back to P / n.
    """
    rate = monthly_rate(annual_rate)
    if rate == 0:
        return round_money(principal / term_months)

    growth = math.pow(1 + rate, term_months)
    payment = principal * (rate * growth) / (growth - 1)
    return round_money(payment)
