"""Core Banking API HTTP client"""

import logging
import time
from typing import Any, Dict
from urllib.parse import quote

import httpx

from core_banking_client.config import get_settings
from core_banking_client.domain.endpoints import AuthClaim
from core_banking_client.domain.exceptions import NetworkError
from core_banking_client.domain.models import ApiResponse
from core_banking_client.domain.operations import OPERATIONS, Operation
from core_banking_client.infrastructure.observability.logging import log_request

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class BankingApiClient:
    """Client for the Core Banking API. Every operation returns the raw response body."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        strict: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.strict = strict if strict is not None else settings.strict_status
        self._transport = transport

    async def _request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Issue a single HTTP request with JSON content type.

        Raises:
            NetworkError: When the transport fails (connection refused, DNS, bad URL)
        """
        merged_headers = {**DEFAULT_HEADERS, **(headers or {})}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                return await client.request(method, url, headers=merged_headers, **kwargs)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise NetworkError(str(e) or type(e).__name__) from e

    def _url(self, operation: Operation, segment: str | None = None) -> str:
        url = f"{self.base_url}{operation.path}"
        if segment is not None:
            quoted = quote(segment, safe="")
            # "." and ".." would be collapsed as dot-segments and hit another endpoint
            if quoted in (".", ".."):
                quoted = quoted.replace(".", "%2E")
            url = f"{url}/{quoted}"
        return url

    async def _call(self, operation: Operation, segment: str | None = None, **kwargs: Any) -> str:
        url = self._url(operation, segment)
        start_time = time.time()

        raw = await self._request(operation.method, url, **kwargs)
        response = ApiResponse(status_code=raw.status_code, status_text=raw.reason_phrase, body=raw.text)

        duration_ms = (time.time() - start_time) * 1000
        log_request(operation.name, operation.method, url, response.status_code, duration_ms)

        if response.ok:
            return response.body

        if operation.classifies_non_success_as_error or self.strict:
            raise operation.error(response.status_code, response.status_text, response.body)

        logger.debug(
            "Passing through non-success response",
            extra={"operation": operation.name, "status_code": response.status_code},
        )
        return response.body

    async def get_auth_token(self, claim: AuthClaim | str, username: str, password: str) -> str:
        """
        Request a token for the given claim scope.

        Raises:
            AuthError: Server answered with a non-2xx status
            NetworkError: Transport failure
        """
        claim_value = claim.value if isinstance(claim, AuthClaim) else claim
        return await self._call(
            OPERATIONS["auth_token"],
            params={"claim": claim_value},
            json={"username": username, "password": password},
        )

    async def list_accounts(self) -> str:
        """List all accounts. Raises AccountListingError on non-2xx."""
        return await self._call(OPERATIONS["list_accounts"])

    async def validate_account(self, account_id: str) -> str:
        """
        Validate an account identifier.

        A non-2xx status may just mean the account is invalid, so the body is
        returned as-is unless the client is strict.
        """
        return await self._call(OPERATIONS["validate_account"], segment=account_id)

    async def get_account_balance(self, account_id: str) -> str:
        """Fetch an account balance. Raises BalanceError on non-2xx."""
        return await self._call(OPERATIONS["account_balance"], segment=account_id)

    async def transfer_funds(self, from_account: str, to_account: str, amount: float) -> str:
        """
        Transfer funds between two accounts.

        A rejected transfer comes back as a non-2xx body, returned as-is unless
        the client is strict.
        """
        return await self._call(
            OPERATIONS["transfer"],
            json={"fromAccount": from_account, "toAccount": to_account, "amount": amount},
        )
