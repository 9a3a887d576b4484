"""Currency wallets that keep a running balance from processed transactions."""

from __future__ import annotations

from .ids import IDGenerator
from .numeric import Decimal
from .transaction import Transaction, TransactionStatus, TransactionType


class Wallet:
    """A wallet in one currency holding transactions and a balance."""

    _id_gen = IDGenerator("WLT", 9)

    def __init__(self, currency: str) -> None:
        if not currency or len(currency) != 3:
            raise ValueError("Currency must be a 3-letter code")
        self.id = self._id_gen.next()
        self.currency = currency
        self._transactions: list[Transaction] = []
        self._balance = Decimal(0)

    @property
    def transactions(self) -> list[Transaction]:
        """Transactions added to the wallet, in order."""
        return list(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        """Record a transaction without applying it."""
        if transaction is None:
            raise ValueError("Transaction cannot be null")
        self._transactions.append(transaction)

    def process_transaction(self, transaction: Transaction) -> None:
        """Apply a transaction to the balance and mark it completed."""
        if transaction is None:
            raise ValueError("Transaction cannot be null")
        if transaction.type is TransactionType.DEPOSIT:
            self._balance = self._balance + transaction.amount
        elif transaction.type is TransactionType.WITHDRAWAL:
            self._balance = self._balance - transaction.amount
        elif transaction.type in (TransactionType.TRANSFER, TransactionType.TRADE):
            pass
        else:
            raise RuntimeError("Unknown transaction type")
        transaction.status = TransactionStatus.COMPLETED

    def net_worth(self) -> Decimal:
        """The wallet's current balance."""
        return self._balance

    def __repr__(self) -> str:
        return f"Wallet(id={self.id!r}, currency={self.currency!r}, balance={self._balance})"