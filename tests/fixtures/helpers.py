"""
Named accessors for the canned registry responses.
"""
from companies_house.models import CompaniesHouseGovUKResponse, CompaniesHouseResponse
from tests.fixtures.loader import FixtureLoader

TEST_CRN = "111111111"

COMPANIES_HOUSE_RESPONSE = "companies-house-response.json"
GOV_UK_RESPONSE = "companies-house-gov-UK-response.json"
GOV_UK_RESPONSE_CRN_404 = "companies-house-gov-UK-response-crn-404.json"

_loader = FixtureLoader()


def get_companies_house_response_list() -> list[CompaniesHouseResponse]:
    return _loader.load_collection(COMPANIES_HOUSE_RESPONSE, CompaniesHouseResponse)


def get_companies_house_gov_uk_response() -> CompaniesHouseGovUKResponse:
    return _loader.load_object(GOV_UK_RESPONSE, CompaniesHouseGovUKResponse)


def get_companies_house_gov_uk_response_crn_not_exist() -> CompaniesHouseGovUKResponse:
    return _loader.load_object(GOV_UK_RESPONSE_CRN_404, CompaniesHouseGovUKResponse)
