"""
Async client for the Companies House public data API.
Provides retry logic, auth and 404 mapping onto the not-found response variant.
"""
import asyncio
import re

import httpx
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from companies_house.config import Settings, settings as default_settings
from companies_house.core.exceptions import (
    DataSourceAuthError,
    DataSourceError,
    DataSourceRateLimitError,
    DataSourceTimeoutError,
    ParsingError,
    ValidationError,
)
from companies_house.data_sources.base import DataSource
from companies_house.models.domain import (
    ApiError,
    CompaniesHouseGovUKResponse,
    CompaniesHouseResponse,
)

COMPANY_NUMBER_PATTERN = re.compile(r"^[A-Z0-9]{1,10}$")

_errors_adapter = TypeAdapter(list[ApiError])


class _RetryableResponseError(DataSourceError):
    """5xx from the registry; retried before surfacing as DataSourceError."""


def normalize_company_number(company_number: str) -> str:
    """
    Normalize a company registration number.

    Strips whitespace and upper-cases prefixed numbers (e.g. "sc123456").
    Purely numeric numbers shorter than 8 digits are zero-padded, matching
    how the registry keys its records.

    Raises:
        ValidationError: If the value cannot be a company number
    """
    if not isinstance(company_number, str):
        raise ValidationError(f"Company number must be a string, got {type(company_number).__name__}")

    value = company_number.strip().upper()
    if not COMPANY_NUMBER_PATTERN.match(value):
        raise ValidationError(f"Invalid company number: {company_number!r}")

    if value.isdigit() and len(value) < 8:
        value = value.zfill(8)
    return value


class CompaniesHouseClient(DataSource):
    """
    Company profile lookups against the registry.

    A 404 from the registry is not an error: it becomes a
    CompaniesHouseGovUKResponse with status "not-found".
    """

    def __init__(
        self,
        config: Settings | None = None,
        http_client: httpx.AsyncClient | None = None
    ):
        super().__init__()
        self.config = config or default_settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self.config.companies_house_api_url,
            auth=self.config.get_auth(),
            timeout=self.config.request_timeout,
            headers={"Accept": "application/json"},
        )

    async def fetch(self, **kwargs) -> CompaniesHouseGovUKResponse:
        """Fetch a profile; expects a `company_number` keyword."""
        return await self.get_company_profile(kwargs["company_number"])

    async def get_company_profile(self, company_number: str) -> CompaniesHouseGovUKResponse:
        """
        Fetch the government API profile for one company.

        Args:
            company_number: Company registration number

        Returns:
            Parsed profile, or the not-found variant on 404

        Raises:
            ValidationError: If the company number is malformed
            DataSourceAuthError: On 401/403
            DataSourceRateLimitError: On 429
            DataSourceTimeoutError: If every attempt timed out
            DataSourceError: On other HTTP or transport failures
            ParsingError: If the body does not match the profile shape
        """
        number = normalize_company_number(company_number)
        response = await self._get_with_retry(f"/company/{number}", number)

        if response.status_code == 404:
            self.logger.info("company_not_found", company_number=number)
            return CompaniesHouseGovUKResponse.not_found(
                number,
                self._parse_errors(response),
            )

        try:
            profile = CompaniesHouseGovUKResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            self.logger.error(
                "company_profile_parse_failed",
                company_number=number,
                error_count=e.error_count()
            )
            raise ParsingError(
                f"Invalid company profile for {number}: {e}"
            ) from e

        self.logger.info(
            "company_profile_fetched",
            company_number=number,
            company_status=profile.company_status.value if profile.company_status else None
        )
        return profile

    async def lookup(self, company_number: str) -> CompaniesHouseResponse:
        """Fetch one company and map it onto the proxy record."""
        profile = await self.get_company_profile(company_number)
        return CompaniesHouseResponse.from_gov_uk(profile)

    async def lookup_many(self, company_numbers: list[str]) -> list[CompaniesHouseResponse]:
        """
        Look up several companies concurrently.

        Results keep the order of `company_numbers`. Concurrency is capped
        at `max_parallel_tasks`. The first failure cancels the remaining
        lookups and propagates once they have all finished.
        """
        semaphore = asyncio.Semaphore(self.config.max_parallel_tasks)

        async def bounded(number: str) -> CompaniesHouseResponse:
            async with semaphore:
                return await self.lookup(number)

        tasks = [asyncio.ensure_future(bounded(n)) for n in company_numbers]
        try:
            return list(await asyncio.gather(*tasks))
        except Exception:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            self.logger.warning("lookup_many_aborted", cancelled=len(pending))
            raise

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _get_with_retry(self, path: str, company_number: str) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries),
            wait=wait_exponential(
                multiplier=self.config.retry_wait_seconds,
                max=self.config.retry_wait_seconds * 10
            ),
            retry=retry_if_exception_type(
                (_RetryableResponseError, DataSourceTimeoutError, httpx.TransportError)
            ),
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    return await self._get(path, company_number)
        except _RetryableResponseError as e:
            raise DataSourceError(str(e)) from e
        except httpx.TransportError as e:
            self.logger.error("registry_transport_error", path=path, error=str(e))
            raise DataSourceError(f"Failed to reach registry for {company_number}: {e}") from e

    async def _get(self, path: str, company_number: str) -> httpx.Response:
        self.logger.debug("registry_request_started", path=path)
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as e:
            self.logger.warning("registry_request_timeout", path=path)
            raise DataSourceTimeoutError(
                f"Request timeout for company {company_number}: {e}"
            ) from e

        status = response.status_code
        if status == 404 or status < 400:
            return response

        if status in (401, 403):
            self.logger.error("registry_auth_failed", path=path, status=status)
            raise DataSourceAuthError(f"Registry rejected credentials (HTTP {status})")

        if status == 429:
            self.logger.warning("registry_rate_limited", path=path)
            raise DataSourceRateLimitError(f"Rate limited looking up {company_number}")

        if status >= 500:
            self.logger.warning("registry_server_error", path=path, status=status)
            raise _RetryableResponseError(f"HTTP error {status} for company {company_number}")

        self.logger.error("registry_http_error", path=path, status=status)
        raise DataSourceError(f"HTTP error {status} for company {company_number}")

    def _parse_errors(self, response: httpx.Response) -> list[ApiError]:
        if not response.content:
            return []
        try:
            body = response.json()
            return _errors_adapter.validate_python(body.get("errors", []))
        except (ValueError, AttributeError, PydanticValidationError):
            self.logger.warning("not_found_body_unreadable", size=len(response.content))
            return []
