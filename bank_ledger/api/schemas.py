"""
Pydantic schemas for API requests and responses
"""

from typing import Optional
from pydantic import BaseModel, Field

from ..accounts import Account
from ..users import User


class CreateUserRequest(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: Optional[str] = None


class CreateAccountRequest(BaseModel):
    id: str = Field(..., min_length=1)
    initial_balance: int = 0
    owner_id: Optional[str] = None


class AddUserAccountRequest(BaseModel):
    id: str = Field(..., min_length=1)
    balance: int = 0


class AmountRequest(BaseModel):
    amount: int = Field(..., description="Amount in smallest currency units")


class TransferRequest(BaseModel):
    from_account_id: str
    to_account_id: str
    amount: int = Field(..., description="Amount in smallest currency units")


class AccountModel(BaseModel):
    id: str
    balance: int
    owner_id: Optional[str] = None
    created_at: str
    updated_at: str

    @classmethod
    def from_account(cls, account: Account) -> 'AccountModel':
        return cls(
            id=account.id,
            balance=account.balance,
            owner_id=account.owner_id,
            created_at=account.created_at.isoformat(),
            updated_at=account.updated_at.isoformat()
        )


class UserModel(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    created_at: str

    @classmethod
    def from_user(cls, user: User) -> 'UserModel':
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at.isoformat()
        )
