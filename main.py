"""
Look up companies on the registry and print the proxy responses as JSON.

Usage:
    COMPANIES_HOUSE_API_KEY=... python main.py 00000006 SC123456
"""
import asyncio
import json
import sys

from companies_house.core.exceptions import CompaniesHouseError
from companies_house.data_sources import CompaniesHouseClient
from companies_house.utils.logging import get_logger

logger = get_logger(__name__)


async def main(company_numbers: list[str]) -> int:
    """Run the lookups; returns the process exit code."""
    if not company_numbers:
        print("usage: python main.py COMPANY_NUMBER [COMPANY_NUMBER ...]", file=sys.stderr)
        return 2

    try:
        async with CompaniesHouseClient() as client:
            responses = await client.lookup_many(company_numbers)
    except CompaniesHouseError as e:
        logger.error("lookup_failed", error=str(e), error_type=type(e).__name__)
        print(f"✗ Lookup failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps([r.model_dump(mode="json") for r in responses], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
