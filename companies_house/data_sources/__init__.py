"""
Data sources backed by the Companies House public data API.
"""
from companies_house.data_sources.base import DataSource
from companies_house.data_sources.companies_house_client import (
    CompaniesHouseClient,
    normalize_company_number,
)

__all__ = [
    "DataSource",
    "CompaniesHouseClient",
    "normalize_company_number",
]
