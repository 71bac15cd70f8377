"""
models/transaction.py
---------------------
Domain models for the finance demo: transactions, payment channels
and accounts.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class PaymentChannel(str, Enum):
    """How a transaction is processed."""
    BANK_TRANSFER = "BankTransfer"
    MOBILE_MONEY = "MobileMoney"
    CRYPTO_WALLET = "CryptoWallet"


class AccountKind(str, Enum):
    """
    STANDARD accounts always debit; SAVINGS accounts refuse to go
    below zero.
    """
    STANDARD = "standard"
    SAVINGS = "savings"


@dataclass(frozen=True)
class Transaction:
    """
    A single debit against an account.

    Attributes:
        id: Unique transaction number.
        date: Date of the transaction.
        amount: Amount debited.
        category: Spending category (e.g., Groceries, Utilities).
    """
    id: int
    date: date
    amount: float
    category: str

    def __str__(self) -> str:
        return f"#{self.id} | {self.category} | {self.amount:.2f} | {self.date}"


@dataclass
class Account:
    """An account whose balance is debited by transactions."""
    account_number: str
    balance: float
    kind: AccountKind = AccountKind.STANDARD

    def __str__(self) -> str:
        return f"{self.account_number} ({self.kind.value}): {self.balance:.2f}"
