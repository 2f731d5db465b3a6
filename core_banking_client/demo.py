"""
Core Banking API demo.

Exercises authentication, account operations and transfers in a fixed order,
printing raw responses. A failing test case is reported and the run moves on.

Usage:
    BASE_URL=http://localhost:8123 python -m core_banking_client.demo
"""

import asyncio
import sys
from typing import Awaitable, Callable

import httpx

from core_banking_client.config import get_settings
from core_banking_client.domain.endpoints import AuthClaim, DESTINATION_ACCOUNT, SAMPLE_ACCOUNTS
from core_banking_client.domain.models import DemoReport
from core_banking_client.infrastructure.clients.banking import BankingApiClient
from core_banking_client.infrastructure.observability.logging import log_test_failure, setup_logging
from core_banking_client.utils.console import log, log_empty, print_section, print_test
from core_banking_client.utils.formatters import format_simple_response

AUTH_SECTION = "1. AUTHENTICATION TESTS WITH SCOPES"
ACCOUNT_SECTION = "2. ACCOUNT OPERATIONS"
TRANSFER_SECTION = "3. TRANSFER TESTS"
SUMMARY_SECTION = "4. SUMMARY"

TRANSFER_AMOUNT = 50.00


async def run_test(test_name: str, test_function: Callable[[], Awaitable[None]]) -> bool:
    """Run one test case; any error is printed and logged, never raised"""
    try:
        await test_function()
        return True
    except Exception as e:
        log(f"Error in {test_name}: {e}")
        log_test_failure(test_name, e)
        return False


async def run_demo(
    base_url: str,
    transport: httpx.AsyncBaseTransport | None = None,
    pretty: bool = False,
) -> DemoReport:
    client = BankingApiClient(base_url, transport=transport)
    report = DemoReport()

    def show(response: str) -> str:
        return format_simple_response(response) if pretty else response

    async def case(section: str, title: str, test_name: str, test_function: Callable[[], Awaitable[None]]) -> None:
        print_test(title)
        report.record(section, test_name, await run_test(test_name, test_function))

    log("=== Core Banking API Demo ===")
    log(f"Base URL: {client.base_url}")
    log("Testing key endpoints...")
    log_empty()

    # 1. Authentication
    print_section(AUTH_SECTION)

    async def enquiry_token() -> None:
        log("Getting enquiry token...")
        log(show(await client.get_auth_token(AuthClaim.ENQUIRY, "alice", "any")))

    async def transfer_token() -> None:
        log("Getting transfer token...")
        log(show(await client.get_auth_token(AuthClaim.TRANSFER, "bob", "secret")))

    await case(AUTH_SECTION, "1.1 Enquiry token (default scope)", "1.1 Enquiry token", enquiry_token)
    await case(AUTH_SECTION, "1.2 Transfer token (maximum scope)", "1.2 Transfer token", transfer_token)

    # 2. Accounts
    print_section(ACCOUNT_SECTION)

    async def list_accounts() -> None:
        log("Getting all accounts...")
        log(show(await client.list_accounts()))

    async def validate_accounts() -> None:
        for account_id, label in (
            (SAMPLE_ACCOUNTS.valid, "valid"),
            (SAMPLE_ACCOUNTS.invalid, "invalid"),
            (SAMPLE_ACCOUNTS.non_existent, "non-existent"),
        ):
            try:
                response = await client.validate_account(account_id)
                log(f"{account_id} ({label}): {show(response)}")
            except Exception as e:
                log(f"{account_id} ({label}): Error - {e}")
                log_test_failure(f"2.2 Validate {account_id}", e)

    async def account_balance() -> None:
        log(f"{SAMPLE_ACCOUNTS.valid} balance:")
        log(show(await client.get_account_balance(SAMPLE_ACCOUNTS.valid)))

    await case(ACCOUNT_SECTION, "2.1 List all accounts", "2.1 List accounts", list_accounts)
    await case(ACCOUNT_SECTION, "2.2 Validate accounts", "2.2 Validate accounts", validate_accounts)
    await case(ACCOUNT_SECTION, "2.3 Get account balance", "2.3 Get balance", account_balance)

    # 3. Transfers
    print_section(TRANSFER_SECTION)

    async def basic_transfer() -> None:
        log("Transfer without authentication:")
        log(show(await client.transfer_funds(SAMPLE_ACCOUNTS.valid, DESTINATION_ACCOUNT, TRANSFER_AMOUNT)))

    async def invalid_transfer() -> None:
        log("Transfer with invalid account:")
        log(show(await client.transfer_funds(SAMPLE_ACCOUNTS.invalid, DESTINATION_ACCOUNT, TRANSFER_AMOUNT)))

    await case(TRANSFER_SECTION, "3.1 Basic transfer (no auth)", "3.1 Basic transfer", basic_transfer)
    await case(TRANSFER_SECTION, "3.2 Invalid transfer", "3.2 Invalid transfer", invalid_transfer)

    # 4. Summary
    print_section(SUMMARY_SECTION)
    for section, label in (
        (AUTH_SECTION, "Authentication: Scope-based token requests"),
        (ACCOUNT_SECTION, "Account Operations: Listing, validation and balance checks"),
        (TRANSFER_SECTION, "Transfer Operations: Basic and invalid transfers"),
    ):
        mark = "✅" if report.section_ok(section) else "⚠️"
        log(f"{mark} {label}")
    log_empty()
    log(f"Demo completed: {report.passed}/{report.total} test cases ran without errors.")

    return report


def main() -> None:
    try:
        settings = get_settings()
        setup_logging(settings.log_level)
        asyncio.run(run_demo(settings.base_url, pretty=settings.pretty_json))
    except Exception as e:
        print(f"Fatal error running demo: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
