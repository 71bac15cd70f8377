"""
services/finance_service.py
---------------------------
Business logic for the finance demo: routing transactions through a
payment channel, debiting accounts, and recording processed transactions.
"""

from config import DEFAULT_CURRENCY
from models.result import ErrorKind, Result
from models.transaction import Account, AccountKind, PaymentChannel, Transaction
from repositories.repository import Repository
from utils.logger import get_logger

logger = get_logger(__name__)


class FinanceService:
    """
    Handles transactions for a single account.

    Workflow:
        1. Process each transaction through its payment channel.
        2. Apply it to the account.
        3. Record it in the transaction repository.
    """

    def __init__(self, currency: str = DEFAULT_CURRENCY):
        self.currency = currency
        self.repo: Repository[Transaction] = Repository(name="transactions")

    def process(self, transaction: Transaction, channel: PaymentChannel) -> str:
        """Return the channel's processing line for a transaction."""
        line = (
            f"[{channel.value}] Processing {transaction.category} of "
            f"{transaction.amount:.2f} {self.currency} on {transaction.date}."
        )
        logger.info(f"Processed transaction #{transaction.id} via {channel.value}")
        return line

    def apply_transaction(self, account: Account, transaction: Transaction) -> Result[float]:
        """
        Debit `transaction.amount` from `account`.

        Savings accounts refuse a debit larger than the current balance
        and leave the balance untouched.

        Returns:
            Success with the new balance, or INSUFFICIENT_FUNDS.
        """
        if account.kind is AccountKind.SAVINGS and transaction.amount > account.balance:
            return Result.failure(
                ErrorKind.INSUFFICIENT_FUNDS,
                f"Insufficient funds for #{transaction.id}: "
                f"{transaction.amount:.2f} requested, {account.balance:.2f} available.",
            )
        account.balance -= transaction.amount
        logger.info(f"Applied #{transaction.id} to {account.account_number}; balance {account.balance:.2f}")
        return Result.success(account.balance)

    def record(self, transaction: Transaction) -> Result[None]:
        return self.repo.add(transaction)

    def total_recorded(self) -> float:
        return sum(t.amount for t in self.repo.get_all())
