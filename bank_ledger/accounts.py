"""
Account Module

Defines the Account record and the AccountRepository contract the ledger
persists through, plus a repository backed by a StorageInterface.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from contextlib import contextmanager

from .storage import StorageInterface, StorageRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Account(StorageRecord):
    """
    Monetary account holding an integer balance in smallest currency units
    """
    id: str
    balance: int = 0
    owner_id: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)


class AccountRepository(ABC):
    """Keyed store of Account records used by the ledger"""

    @abstractmethod
    def exists_by_id(self, account_id: str) -> bool:
        """Check if an account is stored under account_id"""
        pass

    @abstractmethod
    def find_by_id(self, account_id: str) -> Optional[Account]:
        """Load an account, None if absent"""
        pass

    @abstractmethod
    def save(self, account: Account) -> bool:
        """Insert a new account"""
        pass

    @abstractmethod
    def update(self, account: Account) -> bool:
        """Overwrite an existing account"""
        pass

    @abstractmethod
    def delete(self, account_id: str) -> bool:
        """Remove an account, True if something was removed"""
        pass

    @abstractmethod
    def find_all(self) -> List[Account]:
        """Load every stored account"""
        pass

    @contextmanager
    def atomic(self):
        """Unit of work scope (default no-op)"""
        yield


class StorageAccountRepository(AccountRepository):
    """AccountRepository backed by a StorageInterface table"""

    def __init__(self, storage: StorageInterface, table: str = "accounts"):
        self.storage = storage
        self.table = table

    def exists_by_id(self, account_id: str) -> bool:
        return self.storage.exists(self.table, account_id)

    def find_by_id(self, account_id: str) -> Optional[Account]:
        data = self.storage.load(self.table, account_id)
        if data is None:
            return None
        return self._account_from_dict(data)

    def save(self, account: Account) -> bool:
        # Inserts only; overwriting goes through update()
        if self.storage.exists(self.table, account.id):
            return False
        self.storage.save(self.table, account.id, account.to_dict())
        return True

    def update(self, account: Account) -> bool:
        if not self.storage.exists(self.table, account.id):
            return False
        self.storage.save(self.table, account.id, account.to_dict())
        return True

    def delete(self, account_id: str) -> bool:
        return self.storage.delete(self.table, account_id)

    def find_all(self) -> List[Account]:
        return [self._account_from_dict(data) for data in self.storage.load_all(self.table)]

    @contextmanager
    def atomic(self):
        with self.storage.atomic():
            yield

    def _account_from_dict(self, data: Dict) -> Account:
        """Convert dictionary to Account"""
        account = Account.from_dict(data)
        account.balance = int(account.balance)
        return account
