"""Banking client exceptions"""


class BankingClientError(Exception):
    """Base exception for the banking client"""

    pass


class NetworkError(BankingClientError):
    """HTTP transport could not complete the exchange"""

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")


class OperationError(BankingClientError):
    """Server responded with a non-success status for an operation"""

    prefix = "Request failed"

    def __init__(self, status_code: int, status_text: str, body: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"{self.prefix}: {status_code} {status_text} - {body}")


class AuthError(OperationError):
    """Token request rejected"""

    prefix = "Auth failed"


class AccountListingError(OperationError):
    """Account listing failed"""

    prefix = "Failed to list accounts"


class BalanceError(OperationError):
    """Balance lookup failed"""

    prefix = "Failed to get balance"


class AccountValidationError(OperationError):
    """Raised for validation only when strict status classification is on"""

    prefix = "Account validation failed"


class TransferError(OperationError):
    """Raised for transfers only when strict status classification is on"""

    prefix = "Transfer failed"
