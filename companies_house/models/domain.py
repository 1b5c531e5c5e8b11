"""
Domain models for Companies House registry responses.
"""
from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class CompanyStatus(str, Enum):
    """Company status values used by the registry."""

    ACTIVE = "active"
    DISSOLVED = "dissolved"
    LIQUIDATION = "liquidation"
    RECEIVERSHIP = "receivership"
    ADMINISTRATION = "administration"
    VOLUNTARY_ARRANGEMENT = "voluntary-arrangement"
    CONVERTED_CLOSED = "converted-closed"
    INSOLVENCY_PROCEEDINGS = "insolvency-proceedings"
    REGISTERED = "registered"
    REMOVED = "removed"
    CLOSED = "closed"
    OPEN = "open"


class LookupStatus(str, Enum):
    """Outcome of a lookup; a missing company is a status, not an exception."""

    FOUND = "found"
    NOT_FOUND = "not-found"


class ResponseModel(BaseModel):
    """Immutable base for anything parsed from the registry or from fixtures."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Address(ResponseModel):
    """Registered office address as returned by the registry."""

    address_line_1: str | None = None
    address_line_2: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None

    def one_line(self) -> str:
        parts = [
            self.address_line_1,
            self.address_line_2,
            self.locality,
            self.region,
            self.postal_code,
            self.country,
        ]
        return ", ".join(part.strip() for part in parts if part and part.strip())


class ApiError(ResponseModel):
    """One entry of the registry's `errors` array."""

    error: str
    type: str | None = None
    location: str | None = None
    location_type: str | None = None


class CompaniesHouseGovUKResponse(ResponseModel):
    """Company profile echoed from the government API."""

    company_number: str
    company_name: str | None = None
    company_status: CompanyStatus | None = None
    type: str | None = None
    jurisdiction: str | None = None
    date_of_creation: date | None = None
    date_of_cessation: date | None = None
    sic_codes: list[str] = Field(default_factory=list)
    registered_office_address: Address | None = None
    has_been_liquidated: bool | None = None
    can_file: bool | None = None

    status: LookupStatus = LookupStatus.FOUND
    errors: list[ApiError] = Field(default_factory=list)

    @classmethod
    def not_found(
        cls,
        company_number: str,
        errors: list[ApiError] | None = None
    ) -> "CompaniesHouseGovUKResponse":
        """Build the 404 variant for a company number the registry does not know."""
        return cls(
            company_number=company_number,
            status=LookupStatus.NOT_FOUND,
            errors=errors or [],
        )

    @property
    def is_found(self) -> bool:
        return self.status == LookupStatus.FOUND


class CompaniesHouseResponse(ResponseModel):
    """The proxy's own record of one company lookup."""

    company_number: str
    company_name: str | None = None
    company_status: CompanyStatus | None = None
    company_type: str | None = None
    date_of_creation: date | None = None
    registered_office_address: str | None = None
    status: LookupStatus = LookupStatus.FOUND

    @classmethod
    def from_gov_uk(cls, profile: CompaniesHouseGovUKResponse) -> "CompaniesHouseResponse":
        """Map a government API profile onto the proxy record."""
        address = None
        if profile.registered_office_address is not None:
            address = profile.registered_office_address.one_line() or None

        return cls(
            company_number=profile.company_number,
            company_name=profile.company_name,
            company_status=profile.company_status,
            company_type=profile.type,
            date_of_creation=profile.date_of_creation,
            registered_office_address=address,
            status=profile.status,
        )
