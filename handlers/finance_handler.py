"""
handlers/finance_handler.py
---------------------------
Finance demo: three transactions processed through different payment
channels and applied to a savings account.
Delegates all logic to FinanceService.
"""

from datetime import date

from config import SAVINGS_OPENING_BALANCE
from handlers.common import check
from models.transaction import Account, AccountKind, PaymentChannel, Transaction
from services.finance_service import FinanceService
from utils.logger import get_logger

logger = get_logger(__name__)


def run_finance(opening_balance: float = SAVINGS_OPENING_BALANCE) -> FinanceService:
    """Run the finance demo and return the service holding the recorded transactions."""
    service = FinanceService()
    account = Account("ACC-001", opening_balance, AccountKind.SAVINGS)
    today = date.today()

    batch = [
        (Transaction(1, today, 120.0, "Groceries"), PaymentChannel.MOBILE_MONEY),
        (Transaction(2, today, 250.0, "Utilities"), PaymentChannel.BANK_TRANSFER),
        (Transaction(3, today, 180.0, "Entertainment"), PaymentChannel.CRYPTO_WALLET),
    ]

    print("=== Processing ===")
    for tx, channel in batch:
        print(service.process(tx, channel))

    print("\n=== Applying to account ===")
    for tx, _ in batch:
        applied = service.apply_transaction(account, tx)
        if check(applied, logger, f"Apply #{tx.id}"):
            print(f"Transaction applied. New balance: {applied.value:.2f} {service.currency}")

    for tx, _ in batch:
        check(service.record(tx), logger, f"Record #{tx.id}")

    print(f"\nAll transactions recorded ({len(service.repo)} total, {service.total_recorded():.2f} {service.currency}).")
    print(f"Final account: {account}")
    return service
