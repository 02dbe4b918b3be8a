"""
Component wiring shared by the API routers
"""

from typing import Optional

from ..accounts import StorageAccountRepository
from ..bank import BankService
from ..config import LedgerConfig, get_config
from ..ledger import Ledger
from ..storage import create_storage
from ..users import UserManager


class BankingSystem:
    """Storage, ledger, users and bank service built from one configuration"""

    def __init__(self, config: Optional[LedgerConfig] = None):
        config = config or get_config()

        self.storage = create_storage(config.storage_backend, config.database_path)
        self.account_repository = StorageAccountRepository(self.storage)
        self.ledger = Ledger(self.account_repository)
        self.user_manager = UserManager(self.storage)
        self.bank = BankService(
            self.user_manager, self.ledger,
            default_account_prefix=config.default_account_prefix
        )

    def close(self) -> None:
        self.storage.close()


_banking_system: Optional[BankingSystem] = None


def get_banking_system() -> BankingSystem:
    """Process-wide BankingSystem, created on first use"""
    global _banking_system
    if _banking_system is None:
        _banking_system = BankingSystem()
    return _banking_system
