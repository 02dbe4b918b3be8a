"""
Bank Service Module

Ties users to ledger accounts: registers users together with a default
account and routes accounts to their owners.
"""

from typing import List, Optional

from .accounts import Account
from .ledger import Ledger
from .users import User, UserManager
from .logging_config import get_logger, log_action


DEFAULT_ACCOUNT_PREFIX = "default_"


class BankService:
    """
    Orchestrates UserManager and Ledger
    """

    def __init__(self, user_manager: UserManager, ledger: Ledger,
                 default_account_prefix: str = DEFAULT_ACCOUNT_PREFIX):
        self.user_manager = user_manager
        self.ledger = ledger
        self.default_account_prefix = default_account_prefix
        self.logger = get_logger("bank_ledger.bank")

    def default_account_id(self, user_id: str) -> str:
        return f"{self.default_account_prefix}{user_id}"

    def register_new_user(self, user: User) -> bool:
        """
        Register a user and open a zero-balance default account for them

        Returns:
            False if the user already exists or the default account could not
            be created
        """
        if not self.user_manager.create_user(user):
            return False

        account_id = self.default_account_id(user.id)
        if not self.ledger.create_account(account_id, 0, user.id):
            log_action(
                self.logger, "warning", f"Default account {account_id} not created",
                user_id=user.id, action="register_user", resource=f"account:{account_id}"
            )
            return False

        return True

    def get_user_accounts(self, user_id: str) -> List[Account]:
        """All accounts owned by user_id"""
        return [
            account for account in self.ledger.get_all_accounts()
            if account is not None and account.owner_id == user_id
        ]

    def get_user(self, user_id: str) -> Optional[User]:
        return self.user_manager.get_user(user_id)

    def add_account_to_user(self, user_id: str, account: Account) -> bool:
        """
        Create account under user_id

        Returns:
            False if the user is unknown or the account id is already taken
        """
        if self.user_manager.get_user(user_id) is None:
            return False

        if self.ledger.get_account(account.id) is not None:
            return False

        account.owner_id = user_id
        return self.ledger.create_account(account.id, account.balance, user_id)

    def get_account(self, account_id: str) -> Optional[Account]:
        return self.ledger.get_account(account_id)

    def delete_account(self, account_id: str) -> bool:
        return self.ledger.delete_account(account_id)
