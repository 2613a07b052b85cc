"""Static loan product catalog and form validation metadata"""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class LoanProduct:
    """Loan product offered to applicants"""

    id: str
    name: str
    description: str
    min_amount: float
    max_amount: float
    min_term: int
    max_term: int
    min_rate: float
    max_rate: float
    purposes: List[str]

    def accepts_amount(self, amount: float) -> bool:
        return self.min_amount <= amount <= self.max_amount

    def accepts_term(self, term_months: int) -> bool:
        return self.min_term <= term_months <= self.max_term


PERSONAL_LOAN = LoanProduct(
    id="personal_loan",
    name="Personal Loan",
    description="Flexible personal financing for various needs",
    min_amount=5000.0,
    max_amount=300000.0,
    min_term=6,
    max_term=60,
    min_rate=10.5,
    max_rate=18.5,
    purposes=["debt_consolidation", "home_improvement", "education", "medical", "other"],
)

VEHICLE_LOAN = LoanProduct(
    id="vehicle_loan",
    name="Vehicle Finance",
    description="Financing for new and used vehicles",
    min_amount=50000.0,
    max_amount=1500000.0,
    min_term=12,
    max_term=72,
    min_rate=8.5,
    max_rate=15.0,
    purposes=["new_vehicle", "used_vehicle"],
)

LOAN_PRODUCTS: List[LoanProduct] = [PERSONAL_LOAN, VEHICLE_LOAN]


def product_for_purpose(purpose: str) -> LoanProduct:
    """Any purpose mentioning "vehicle" is vehicle finance; everything else is a personal loan"""
    return VEHICLE_LOAN if "vehicle" in purpose else PERSONAL_LOAN


# Served as-is to the application form
VALIDATION_RULES: Dict[str, Dict[str, Dict[str, Any]]] = {
    "personalInfo": {
        "age": {
            "min": 18,
            "max": 65,
            "required": True,
            "errorMessage": "Age must be between 18 and 65",
        },
        "employmentStatus": {
            "required": True,
            "options": ["employed", "self_employed", "unemployed", "retired"],
            "errorMessage": "Please select your employment status",
        },
        "employmentDuration": {
            "min": 3,
            "required": True,
            "errorMessage": "Minimum 3 months employment required",
        },
    },
    "financialInfo": {
        "monthlyIncome": {
            "min": 5000.0,
            "required": True,
            "errorMessage": "Minimum monthly income of R5,000 required",
        },
        "monthlyExpenses": {
            "min": 0,
            "required": True,
            "errorMessage": "Please enter your monthly expenses",
        },
        "creditScore": {
            "min": 300,
            "max": 850,
            "required": False,
            "errorMessage": "Credit score must be between 300 and 850",
        },
    },
    "loanDetails": {
        "requestedAmount": {
            "min": 5000.0,
            "max": 300000.0,
            "required": True,
            "errorMessage": "Loan amount must be between R5,000 and R300,000",
        },
        "loanTerm": {
            "min": 6,
            "max": 60,
            "required": True,
            "errorMessage": "Loan term must be between 6 and 60 months",
        },
    },
}
