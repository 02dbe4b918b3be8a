"""
User endpoints
"""

from fastapi import APIRouter, HTTPException, Depends, status

from .dependencies import BankingSystem, get_banking_system
from .schemas import CreateUserRequest, AddUserAccountRequest, AccountModel, UserModel
from ..accounts import Account
from ..users import User


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_user(
    request: CreateUserRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Register a user together with a default account"""
    try:
        user = User(id=request.id, name=request.name, email=request.email)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if system.bank.get_user(user.id) is not None:
        raise HTTPException(status_code=409, detail="User already exists")

    if not system.bank.register_new_user(user):
        raise HTTPException(status_code=409, detail="Default account could not be created")

    return {
        "user_id": user.id,
        "default_account_id": system.bank.default_account_id(user.id),
        "message": "User registered successfully"
    }


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """Get user by ID"""
    user = system.bank.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return UserModel.from_user(user).model_dump()


@router.get("/{user_id}/accounts")
async def get_user_accounts(
    user_id: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """List accounts owned by a user"""
    if system.bank.get_user(user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")

    accounts = system.bank.get_user_accounts(user_id)
    return {"accounts": [AccountModel.from_account(account).model_dump() for account in accounts]}


@router.post("/{user_id}/accounts", status_code=status.HTTP_201_CREATED)
async def add_user_account(
    user_id: str,
    request: AddUserAccountRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Open an additional account for a user"""
    if system.bank.get_user(user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")

    account = Account(id=request.id, balance=request.balance)
    if not system.bank.add_account_to_user(user_id, account):
        raise HTTPException(status_code=409, detail="Account already exists")

    return {"account_id": account.id, "message": "Account created successfully"}
