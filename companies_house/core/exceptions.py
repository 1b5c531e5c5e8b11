"""
Custom exceptions for the Companies House proxy.
Specific exceptions for different failure modes.
"""
from typing import Any


class CompaniesHouseError(Exception):
    """Base exception for all system errors."""
    pass


class ConfigurationError(CompaniesHouseError):
    """Configuration is invalid or missing."""
    pass


class DataSourceError(CompaniesHouseError):
    """Error fetching data from the registry API."""
    pass


class DataSourceTimeoutError(DataSourceError):
    """Registry request timed out."""
    pass


class DataSourceRateLimitError(DataSourceError):
    """Hit rate limit for the registry API."""
    pass


class DataSourceAuthError(DataSourceError):
    """API key missing, invalid or not allowed to access the resource."""
    pass


class ParsingError(CompaniesHouseError):
    """Error parsing response or data."""
    pass


class ValidationError(CompaniesHouseError):
    """Data validation failed."""
    pass


class FixtureError(CompaniesHouseError):
    """Error loading a canned test fixture."""

    def __init__(self, message: str, path: str, shape: Any = None):
        self.path = path
        self.shape = shape
        super().__init__(message)


class FixtureNotFoundError(FixtureError):
    """Fixture path does not resolve to a readable file under the fixture root."""

    def __init__(self, path: str, shape: Any = None, reason: str | None = None):
        message = f"Fixture not found: {path}"
        if shape is not None:
            message += f" (shape={_shape_name(shape)})"
        if reason:
            message += f": {reason}"
        super().__init__(message, path, shape)


class FixtureParseError(FixtureError, ParsingError):
    """Fixture content is not valid JSON or does not match the requested shape."""

    def __init__(self, path: str, shape: Any, detail: str):
        self.detail = detail
        super().__init__(
            f"Failed to parse fixture '{path}' as {_shape_name(shape)}: {detail}",
            path,
            shape,
        )


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)
