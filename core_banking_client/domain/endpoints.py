"""Core Banking API endpoint paths and fixed constant values"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

DEFAULT_BASE_URL = "http://localhost:8123"

ENDPOINTS = MappingProxyType(
    {
        "auth_token": "/authToken",
        "accounts": "/accounts",
        "account_validate": "/accounts/validate",
        "account_balance": "/accounts/balance",
        "transfer": "/transfer",
    }
)


class AuthClaim(str, Enum):
    """Authorization level requested for a token"""

    ENQUIRY = "enquiry"  # read-only
    TRANSFER = "transfer"  # read-write


@dataclass(frozen=True)
class SampleAccounts:
    """Account identifiers used by the demo"""

    valid: str = "ACC1000"
    invalid: str = "ACC2000"
    non_existent: str = "ACC9999"


SAMPLE_ACCOUNTS = SampleAccounts()
DESTINATION_ACCOUNT = "ACC1001"
