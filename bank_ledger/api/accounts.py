"""
Account management endpoints
"""

from fastapi import APIRouter, HTTPException, Depends, status

from .dependencies import BankingSystem, get_banking_system
from .schemas import CreateAccountRequest, AmountRequest, AccountModel
from ..errors import AccountNotFoundError, InsufficientFundsError


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_account(
    request: CreateAccountRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Create a new account"""
    created = system.ledger.create_account(request.id, request.initial_balance, request.owner_id)
    if not created:
        raise HTTPException(status_code=409, detail="Account already exists")

    return {"account_id": request.id, "message": "Account created successfully"}


@router.get("")
async def list_accounts(system: BankingSystem = Depends(get_banking_system)):
    """List all accounts"""
    accounts = system.ledger.get_all_accounts()
    return {"accounts": [AccountModel.from_account(account).model_dump() for account in accounts]}


@router.get("/{account_id}")
async def get_account(
    account_id: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """Get account details"""
    account = system.ledger.get_account(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")

    return AccountModel.from_account(account).model_dump()


@router.get("/{account_id}/balance")
async def get_balance(
    account_id: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """Get account balance"""
    try:
        balance = system.ledger.get_balance(account_id)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"account_id": account_id, "balance": balance}


@router.post("/{account_id}/deposit")
async def deposit(
    account_id: str,
    request: AmountRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Deposit into an account"""
    if not system.ledger.deposit(account_id, request.amount):
        raise HTTPException(status_code=404, detail="Account not found")

    return {
        "account_id": account_id,
        "balance": system.ledger.get_balance(account_id),
        "message": "Deposit processed successfully"
    }


@router.post("/{account_id}/withdraw")
async def withdraw(
    account_id: str,
    request: AmountRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Withdraw from an account"""
    try:
        withdrawn = system.ledger.withdraw(account_id, request.amount)
    except InsufficientFundsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not withdrawn:
        raise HTTPException(status_code=404, detail="Account not found")

    return {
        "account_id": account_id,
        "balance": system.ledger.get_balance(account_id),
        "message": "Withdrawal processed successfully"
    }


@router.delete("/{account_id}")
async def delete_account(
    account_id: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """Delete an account"""
    if not system.ledger.delete_account(account_id):
        raise HTTPException(status_code=404, detail="Account not found")

    return {"account_id": account_id, "message": "Account deleted successfully"}
