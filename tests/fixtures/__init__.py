"""
Test fixtures for the Companies House proxy.

This package provides:
- Canned registry responses under __files/ (mock-server layout)
- FixtureLoader for mapping them onto response models
- Named accessors for the responses used across the suite

Usage:
    from tests.fixtures import FixtureLoader, TEST_CRN

    loader = FixtureLoader()
    profile = loader.load_object("companies-house-gov-UK-response.json", CompaniesHouseGovUKResponse)
    responses = get_companies_house_response_list()
"""
from tests.fixtures.helpers import (
    COMPANIES_HOUSE_RESPONSE,
    GOV_UK_RESPONSE,
    GOV_UK_RESPONSE_CRN_404,
    TEST_CRN,
    get_companies_house_gov_uk_response,
    get_companies_house_gov_uk_response_crn_not_exist,
    get_companies_house_response_list,
)
from tests.fixtures.loader import FixtureLoader

__all__ = [
    "FixtureLoader",
    "TEST_CRN",
    "COMPANIES_HOUSE_RESPONSE",
    "GOV_UK_RESPONSE",
    "GOV_UK_RESPONSE_CRN_404",
    "get_companies_house_response_list",
    "get_companies_house_gov_uk_response",
    "get_companies_house_gov_uk_response_crn_not_exist",
]
