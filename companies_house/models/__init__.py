"""
Response models for the Companies House proxy.
"""
from companies_house.models.domain import (
    Address,
    ApiError,
    CompaniesHouseGovUKResponse,
    CompaniesHouseResponse,
    CompanyStatus,
    LookupStatus,
)

__all__ = [
    "Address",
    "ApiError",
    "CompaniesHouseGovUKResponse",
    "CompaniesHouseResponse",
    "CompanyStatus",
    "LookupStatus",
]
