"""
User Management Module

Stores bank users. Accounts reference users by owner_id; the link is
maintained by BankService, not here.
"""

from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import List, Optional

from .storage import StorageInterface, StorageRecord
from .logging_config import get_logger, log_action


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User(StorageRecord):
    """Bank user"""
    id: str
    name: str
    email: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.id:
            raise ValueError("User id cannot be empty")
        if not self.name or not self.name.strip():
            raise ValueError("User name cannot be empty")


class UserManager:
    """
    Manages user records
    """

    def __init__(self, storage: StorageInterface):
        self.storage = storage
        self.table_name = "users"
        self.logger = get_logger("bank_ledger.users")

    def create_user(self, user: User) -> bool:
        """Save a new user; False if the id is already taken"""
        if self.storage.exists(self.table_name, user.id):
            return False

        self.storage.save(self.table_name, user.id, user.to_dict())
        log_action(
            self.logger, "info", f"User created: {user.id}",
            user_id=user.id, action="create_user", resource=f"user:{user.id}"
        )
        return True

    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        data = self.storage.load(self.table_name, user_id)
        if data:
            return User.from_dict(data)
        return None

    def get_all_users(self) -> List[User]:
        return [User.from_dict(data) for data in self.storage.load_all(self.table_name)]

    def delete_user(self, user_id: str) -> bool:
        deleted = self.storage.delete(self.table_name, user_id)
        if deleted:
            log_action(
                self.logger, "info", f"User deleted: {user_id}",
                user_id=user_id, action="delete_user", resource=f"user:{user_id}"
            )
        return deleted
