"""
Base abstraction for registry data sources.
"""
from abc import ABC, abstractmethod
from typing import Any

from companies_house.utils.logging import get_logger


class DataSource(ABC):
    """Abstract base class for all data sources."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    async def fetch(self, **kwargs) -> Any:
        """
        Fetch data from the source.

        Args:
            **kwargs: Query parameters specific to the data source

        Returns:
            Data from the source (type varies by implementation)

        Raises:
            DataSourceError: If fetch fails
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the source."""
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
