"""
Ledger Module

Account lifecycle and balance mutations on top of an AccountRepository.

Missing accounts are reported as a False return from create/deposit/withdraw/
transfer/delete, while insufficient funds and get_balance on a missing
account raise. Callers rely on both styles, so they are kept as-is.
"""

from datetime import datetime, timezone
from typing import List, Optional

from .accounts import Account, AccountRepository
from .errors import InsufficientFundsError, AccountNotFoundError, PersistenceError
from .logging_config import get_logger, log_action


class _UpdateRejected(PersistenceError):
    """Repository update returned False inside a transfer"""


class Ledger:
    """
    Enforces balance invariants and delegates durability to the repository.

    Every mutation re-reads the account from the repository first. No locking
    is done here; the repository is assumed single-threaded or self-guarding.
    """

    def __init__(self, repository: AccountRepository):
        self.repository = repository
        self.logger = get_logger("bank_ledger.ledger")

    def create_account(self, account_id: str, initial_balance: int, owner_id: Optional[str] = None) -> bool:
        """
        Create a new account

        Args:
            account_id: Unique account id
            initial_balance: Opening balance, accepted as given (negative included)
            owner_id: Owning user id, not checked against the user store

        Returns:
            False if the id is taken, otherwise the repository's save result
        """
        if self.repository.exists_by_id(account_id):
            log_action(
                self.logger, "warning", f"Account {account_id} already exists",
                action="create_account", resource=f"account:{account_id}"
            )
            return False

        if initial_balance < 0:
            self.logger.warning(f"Account {account_id} opened with negative balance {initial_balance}")

        account = Account(id=account_id, balance=initial_balance)
        account.owner_id = owner_id
        saved = self.repository.save(account)

        log_action(
            self.logger, "info", f"Account created: {account_id}",
            user_id=owner_id, action="create_account", resource=f"account:{account_id}",
            extra={"initial_balance": initial_balance, "saved": saved}
        )
        return saved

    def deposit(self, account_id: str, amount: int) -> bool:
        """Add amount to the balance; negative amounts are applied unchecked"""
        if not self.repository.exists_by_id(account_id):
            self._log_missing("deposit", account_id)
            return False

        if amount < 0:
            self.logger.warning(f"Negative deposit of {amount} applied to account {account_id}")

        account = self.repository.find_by_id(account_id)
        account.balance = account.balance + amount
        account.updated_at = datetime.now(timezone.utc)
        updated = self.repository.update(account)

        log_action(
            self.logger, "info", f"Deposit to {account_id}",
            action="deposit", resource=f"account:{account_id}",
            extra={"amount": amount, "balance": account.balance, "updated": updated}
        )
        return updated

    def withdraw(self, account_id: str, amount: int) -> bool:
        """
        Subtract amount from the balance

        Raises:
            InsufficientFundsError: If the balance is lower than amount
        """
        if not self.repository.exists_by_id(account_id):
            self._log_missing("withdraw", account_id)
            return False

        account = self.repository.find_by_id(account_id)
        if account.balance < amount:
            log_action(
                self.logger, "warning", f"Insufficient funds in {account_id}",
                action="withdraw", resource=f"account:{account_id}",
                extra={"amount": amount, "balance": account.balance}
            )
            raise InsufficientFundsError(account_id, account.balance, amount)

        account.balance = account.balance - amount
        account.updated_at = datetime.now(timezone.utc)
        updated = self.repository.update(account)

        log_action(
            self.logger, "info", f"Withdrawal from {account_id}",
            action="withdraw", resource=f"account:{account_id}",
            extra={"amount": amount, "balance": account.balance, "updated": updated}
        )
        return updated

    def transfer(self, from_id: str, to_id: str, amount: int) -> bool:
        """
        Move amount from one account to another

        The source is checked for existence before the destination, and the
        destination check is skipped when the source is missing. Both updates
        run in one repository.atomic() scope; if either write reports failure
        the scope is rolled back and False is returned. Errors raised by the
        repository roll the scope back and propagate.

        A negative amount passes the funds check and debits the destination
        without any balance check.

        Raises:
            InsufficientFundsError: If the source balance is lower than amount,
                before anything is written
        """
        if not (self.repository.exists_by_id(from_id) and self.repository.exists_by_id(to_id)):
            log_action(
                self.logger, "warning", f"Transfer {from_id} -> {to_id} rejected: account not found",
                action="transfer", resource=f"account:{from_id}"
            )
            return False

        source = self.repository.find_by_id(from_id)
        # Same-account transfers must not load a second copy
        destination = source if to_id == from_id else self.repository.find_by_id(to_id)

        if source.balance < amount:
            log_action(
                self.logger, "warning", f"Insufficient funds in {from_id} for transfer to {to_id}",
                action="transfer", resource=f"account:{from_id}",
                extra={"amount": amount, "balance": source.balance}
            )
            raise InsufficientFundsError(
                from_id, source.balance, amount, "Insufficient funds in source account"
            )

        if amount < 0:
            # Applied unchecked, like a negative deposit: the destination is debited
            self.logger.warning(
                f"Negative transfer of {amount} from {from_id} to {to_id} debits the destination unchecked"
            )

        now = datetime.now(timezone.utc)
        source.balance = source.balance - amount
        destination.balance = destination.balance + amount
        source.updated_at = now
        destination.updated_at = now

        try:
            with self.repository.atomic():
                if not self.repository.update(source):
                    raise _UpdateRejected(f"Failed to update source account {from_id}")
                if not self.repository.update(destination):
                    raise _UpdateRejected(f"Failed to update destination account {to_id}")
        except _UpdateRejected as e:
            self.logger.error(f"Transfer {from_id} -> {to_id} rolled back: {e}")
            return False

        log_action(
            self.logger, "info", f"Transfer {from_id} -> {to_id}",
            action="transfer", resource=f"account:{from_id}",
            extra={"to_account": to_id, "amount": amount}
        )
        return True

    def get_balance(self, account_id: str) -> int:
        """
        Get the current balance

        Raises:
            AccountNotFoundError: If no account is stored under account_id
        """
        if not self.repository.exists_by_id(account_id):
            raise AccountNotFoundError(account_id)
        return self.repository.find_by_id(account_id).balance

    def delete_account(self, account_id: str) -> bool:
        deleted = self.repository.delete(account_id)
        if deleted:
            log_action(
                self.logger, "info", f"Account deleted: {account_id}",
                action="delete_account", resource=f"account:{account_id}"
            )
        return deleted

    def get_account(self, account_id: str) -> Optional[Account]:
        """Look up an account, None if absent"""
        return self.repository.find_by_id(account_id)

    def get_all_accounts(self) -> List[Account]:
        return self.repository.find_all()

    def _log_missing(self, action: str, account_id: str) -> None:
        log_action(
            self.logger, "warning", f"Account {account_id} not found",
            action=action, resource=f"account:{account_id}"
        )
