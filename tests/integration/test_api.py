"""Integration tests for API endpoints"""

from unittest.mock import patch
from fastapi.testclient import TestClient
from loan_gateway.domain.exceptions import IncomeNotPositiveError


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_eligibility_endpoint_approval(client: TestClient, eligibility_payload: dict):
    """Test POST /api/loans/eligibility with an eligible applicant"""
    response = client.post("/api/loans/eligibility", json=eligibility_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["eligibilityResult"]["isEligible"] is True
    assert data["eligibilityResult"]["riskCategory"] == "medium"
    assert data["eligibilityResult"]["approvalLikelihood"] == 70
    assert data["eligibilityResult"]["decisionReason"].startswith("Strong income-to-expense ratio")
    assert data["recommendedLoan"]["interestRate"] == 12.5
    assert data["recommendedLoan"]["maxAmount"] == 168000
    assert data["recommendedLoan"]["recommendedAmount"] == 150000
    assert data["affordabilityAnalysis"] == {
        "disposableIncome": 10000,
        "debtToIncomeRatio": 20.0,
        "loanToIncomeRatio": 50.0,
        "affordabilityScore": "poor",
    }


def test_eligibility_endpoint_decline(client: TestClient, eligibility_payload: dict):
    """Test unemployed applicant is declined with a 200 response"""
    eligibility_payload["personalInfo"]["employmentStatus"] = "unemployed"

    response = client.post("/api/loans/eligibility", json=eligibility_payload)

    assert response.status_code == 200
    assert response.json()["eligibilityResult"]["isEligible"] is False


def test_eligibility_endpoint_validation_error(client: TestClient, eligibility_payload: dict):
    """Test schema violations are rejected with 400 before the engine runs"""
    eligibility_payload["financialInfo"]["monthlyIncome"] = 1000

    with patch("loan_gateway.api.v1.eligibility.evaluate_eligibility") as mock_engine:
        response = client.post("/api/loans/eligibility", json=eligibility_payload)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Validation failed"
    assert any("monthlyIncome" in detail["loc"] for detail in data["details"])
    mock_engine.assert_not_called()


def test_eligibility_endpoint_product_bounds(client: TestClient, eligibility_payload: dict):
    """Test personal-loan purposes cannot request vehicle-sized amounts"""
    eligibility_payload["loanDetails"]["requestedAmount"] = 1200000

    response = client.post("/api/loans/eligibility", json=eligibility_payload)
    assert response.status_code == 400

    eligibility_payload["loanDetails"]["loanPurpose"] = "new_vehicle"
    response = client.post("/api/loans/eligibility", json=eligibility_payload)
    assert response.status_code == 200


def test_eligibility_endpoint_domain_error(client: TestClient, eligibility_payload: dict):
    with patch(
        "loan_gateway.api.v1.eligibility.evaluate_eligibility",
        side_effect=IncomeNotPositiveError("Monthly income must be positive"),
    ):
        response = client.post("/api/loans/eligibility", json=eligibility_payload)

    assert response.status_code == 422
    assert response.json()["detail"] == "Monthly income must be positive"


def test_eligibility_endpoint_hides_internal_errors(client: TestClient, eligibility_payload: dict):
    with patch(
        "loan_gateway.api.v1.eligibility.evaluate_eligibility",
        side_effect=RuntimeError("secret stack detail"),
    ):
        response = client.post("/api/loans/eligibility", json=eligibility_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "secret" not in response.text


def test_calculate_rate_endpoint(client: TestClient):
    """Test POST /api/loans/calculate-rate returns a schedule capped at 24 months"""
    response = client.post(
        "/api/loans/calculate-rate",
        json={"loanAmount": 100000, "loanTerm": 48, "creditScore": 760, "loanType": "personal_loan"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["interestRate"] == 11.5
    assert len(data["paymentSchedule"]) == 24
    assert data["paymentSchedule"][0]["month"] == 1
    assert set(data["paymentSchedule"][0]) == {"month", "payment", "principal", "interest", "balance"}
    assert round(data["totalRepayment"] - 100000, 2) == data["totalInterest"]


def test_calculate_rate_endpoint_default_score(client: TestClient):
    response = client.post(
        "/api/loans/calculate-rate",
        json={"loanAmount": 20000, "loanTerm": 12, "loanType": "personal_loan"},
    )

    assert response.status_code == 200
    assert response.json()["interestRate"] == 12.5
    assert len(response.json()["paymentSchedule"]) == 12


def test_calculate_rate_endpoint_validation_error(client: TestClient):
    response = client.post("/api/loans/calculate-rate", json={"loanAmount": 20000, "loanTerm": 12})

    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_products_endpoint(client: TestClient):
    response = client.get("/api/loans/products")

    assert response.status_code == 200
    products = {p["id"]: p for p in response.json()["products"]}
    assert set(products) == {"personal_loan", "vehicle_loan"}
    assert products["vehicle_loan"]["maxAmount"] == 1500000.0
    assert products["vehicle_loan"]["minTerm"] == 12
    assert products["personal_loan"]["interestRateRange"] == {"min": 10.5, "max": 18.5}
    assert "home_improvement" in products["personal_loan"]["purposes"]


def test_validation_rules_endpoint(client: TestClient):
    response = client.get("/api/loans/validation-rules")

    assert response.status_code == 200
    rules = response.json()
    assert rules["personalInfo"]["age"] == {
        "min": 18,
        "max": 65,
        "required": True,
        "errorMessage": "Age must be between 18 and 65",
    }
    assert rules["financialInfo"]["creditScore"]["required"] is False
    assert rules["loanDetails"]["loanTerm"]["max"] == 60


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health").headers["X-Request-ID"]
    assert len(generated) == 36


def test_metrics_endpoint(client: TestClient, eligibility_payload: dict):
    """Test Prometheus metrics endpoint"""
    client.post("/api/loans/eligibility", json=eligibility_payload)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_eligibility_decisions_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_calculate_rate_endpoint_hides_internal_errors(client: TestClient):
    with patch(
        "loan_gateway.api.v1.rates.calculate_rate_and_schedule",
        side_effect=ZeroDivisionError("float division by zero"),
    ):
        response = client.post(
            "/api/loans/calculate-rate",
            json={"loanAmount": 20000, "loanTerm": 12, "loanType": "personal_loan"},
        )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
