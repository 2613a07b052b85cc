"""GET /products and GET /validation-rules - static reference data"""

from fastapi import APIRouter

from loan_gateway.api.v1.schemas import LoanProductSchema, ProductsResponse
from loan_gateway.domain.products import LOAN_PRODUCTS, VALIDATION_RULES

router = APIRouter()


@router.get("/products", response_model=ProductsResponse)
def list_products():
    """List the loan products on offer with their amount, term and rate bounds"""
    return ProductsResponse(products=[LoanProductSchema.from_product(p) for p in LOAN_PRODUCTS])


@router.get("/validation-rules")
def get_validation_rules():
    """Field rules the application form uses for client-side validation"""
    return VALIDATION_RULES
