"""Per-operation request shape and status classification policy"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Type

from core_banking_client.domain.endpoints import ENDPOINTS
from core_banking_client.domain.exceptions import (
    AccountListingError,
    AccountValidationError,
    AuthError,
    BalanceError,
    OperationError,
    TransferError,
)


@dataclass(frozen=True)
class Operation:
    """A banking operation and how its non-success responses are treated"""

    name: str
    method: str
    path: str
    # False means a non-2xx response is a business outcome handed back to the caller
    classifies_non_success_as_error: bool
    error: Type[OperationError]


OPERATIONS = MappingProxyType(
    {
        op.name: op
        for op in (
            Operation("auth_token", "POST", ENDPOINTS["auth_token"], True, AuthError),
            Operation("list_accounts", "GET", ENDPOINTS["accounts"], True, AccountListingError),
            Operation("validate_account", "GET", ENDPOINTS["account_validate"], False, AccountValidationError),
            Operation("account_balance", "GET", ENDPOINTS["account_balance"], True, BalanceError),
            Operation("transfer", "POST", ENDPOINTS["transfer"], False, TransferError),
        )
    }
)
