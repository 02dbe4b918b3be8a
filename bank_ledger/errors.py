"""
Ledger error types

Business-rule violations derive from ValueError so callers that already
guard ledger calls with ``except ValueError`` keep working.
"""


class LedgerError(ValueError):
    """Base class for ledger errors"""


class InsufficientFundsError(LedgerError):
    """A debit exceeds the available balance"""

    def __init__(self, account_id: str, balance: int, amount: int, message: str = "Insufficient funds"):
        super().__init__(message)
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


class AccountNotFoundError(LedgerError):
    """No account is stored under the requested id"""

    def __init__(self, account_id: str):
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class PersistenceError(LedgerError):
    """The persistence layer reported a failed write"""
