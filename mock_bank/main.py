"""
Mock Core Banking server for local demo runs and integration tests.

    uvicorn mock_bank.main:app --port 8123
"""

import uuid
from typing import Dict

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

SUPPORTED_CLAIMS = ("enquiry", "transfer")


class AuthRequest(BaseModel):
    username: str = ""
    password: str = ""


class TransferRequest(BaseModel):
    fromAccount: str
    toAccount: str
    amount: float


def seed_accounts() -> Dict[str, dict]:
    return {
        "ACC1000": {"accountId": "ACC1000", "status": "active", "balance": 1000.00},
        "ACC1001": {"accountId": "ACC1001", "status": "active", "balance": 250.00},
        "ACC2000": {"accountId": "ACC2000", "status": "inactive", "balance": 0.00},
    }


def not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "not found"})


def rejected(reason: str) -> JSONResponse:
    return JSONResponse(status_code=422, content={"status": "rejected", "reason": reason})


def create_app() -> FastAPI:
    """Build an app with its own in-memory account state"""
    app = FastAPI(title="Mock Core Banking Server", version="1.0.0")
    accounts = seed_accounts()

    @app.get("/health")
    def health(): return {"status": "ok"}

    @app.post("/authToken")
    def auth_token(body: AuthRequest, claim: str = "enquiry"):
        if claim not in SUPPORTED_CLAIMS:
            return JSONResponse(status_code=400, content={"error": "unsupported claim"})
        if not body.username or not body.password:
            return JSONResponse(status_code=401, content={"error": "invalid credentials"})
        return {"token": uuid.uuid4().hex, "claim": claim, "username": body.username}

    @app.get("/accounts")
    def list_accounts():
        return {"accounts": list(accounts.values())}

    @app.get("/accounts/validate/{account_id}")
    def validate_account(account_id: str):
        account = accounts.get(account_id)
        if account is None:
            return not_found()
        return {"accountId": account_id, "valid": account["status"] == "active"}

    @app.get("/accounts/balance/{account_id}")
    def account_balance(account_id: str):
        account = accounts.get(account_id)
        if account is None:
            return not_found()
        return {"accountId": account_id, "balance": account["balance"]}

    @app.post("/transfer")
    def transfer(body: TransferRequest):
        source = accounts.get(body.fromAccount)
        target = accounts.get(body.toAccount)
        if source is None or target is None:
            return rejected("unknown account")
        if source["status"] != "active" or target["status"] != "active":
            return rejected("account inactive")
        if body.amount <= 0:
            return rejected("amount must be positive")
        if source["balance"] < body.amount:
            return rejected("insufficient funds")

        source["balance"] = round(source["balance"] - body.amount, 2)
        target["balance"] = round(target["balance"] + body.amount, 2)
        return {
            "status": "ok",
            "transactionId": uuid.uuid4().hex,
            "fromAccount": body.fromAccount,
            "toAccount": body.toAccount,
            "amount": body.amount,
        }

    return app


app = create_app()
