"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.domain.models import EmploymentStatus, FinancialProfile, LoanRequest, PersonalProfile


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def employed_profile() -> PersonalProfile:
    return PersonalProfile(age=35, employment_status=EmploymentStatus.EMPLOYED, employment_duration_months=24)


@pytest.fixture
def average_finances() -> FinancialProfile:
    """R25k income, R15k expenses, R5k existing debt (20% DTI), score 650"""
    return FinancialProfile(
        monthly_income=25000,
        monthly_expenses=15000,
        existing_monthly_debt=5000,
        credit_score=650,
    )


@pytest.fixture
def home_improvement_loan() -> LoanRequest:
    return LoanRequest(requested_amount=150000, term_months=24, purpose="home_improvement")


@pytest.fixture
def eligibility_payload() -> dict:
    """Wire-format eligibility request matching the average applicant fixtures"""
    return {
        "personalInfo": {
            "age": 35,
            "employmentStatus": "employed",
            "employmentDuration": 24,
        },
        "financialInfo": {
            "monthlyIncome": 25000,
            "monthlyExpenses": 15000,
            "existingDebt": 5000,
            "creditScore": 650,
        },
        "loanDetails": {
            "requestedAmount": 150000,
            "loanTerm": 24,
            "loanPurpose": "home_improvement",
        },
    }
