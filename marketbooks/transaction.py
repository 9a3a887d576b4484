"""Financial transactions that move value between assets and liabilities."""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from .ids import IDGenerator
from .numeric import Decimal

if TYPE_CHECKING:
    from .account import Account
    from .holdings import Asset, Liability


class TransactionType(enum.Enum):
    """Kind of a transaction."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"
    TRADE = "trade"


class TransactionStatus(enum.Enum):
    """Processing state of a transaction."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Transaction:
    """A positive amount booked for an account against an asset and/or liability."""

    _id_gen = IDGenerator("TRX", 12)

    def __init__(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        account: Account,
        asset: Asset | None = None,
        liability: Liability | None = None,
    ) -> None:
        amount = Decimal(amount)
        if amount <= Decimal(0):
            raise ValueError("Transaction amount must be positive")
        if account is None:
            raise ValueError("Account cannot be null")
        self.id = self._id_gen.next()
        self.type = transaction_type
        self.amount = amount
        self.account = account
        self.asset = asset
        self.liability = liability
        self.timestamp = datetime.now(timezone.utc)
        self.status = TransactionStatus.PENDING

    def process(self) -> None:
        """Apply the transaction to its asset and liability and mark it completed."""
        if self.account is None:
            raise RuntimeError("Account not set")
        asset, liability, amount = self.asset, self.liability, self.amount

        if self.type is TransactionType.DEPOSIT:
            if asset is None:
                raise RuntimeError("Asset not set for deposit")
            asset.update_value(asset.value + amount)
        elif self.type is TransactionType.WITHDRAWAL:
            if asset is None:
                raise RuntimeError("Asset not set for withdrawal")
            if asset.value < amount:
                raise RuntimeError("Insufficient funds")
            asset.update_value(asset.value - amount)
        elif self.type is TransactionType.TRANSFER:
            if asset is None or liability is None:
                raise RuntimeError("Asset and liability must be set for transfer")
            if asset.value < amount:
                raise RuntimeError("Insufficient funds")
            asset.update_value(asset.value - amount)
            liability.update_value(liability.value + amount)
        elif self.type is TransactionType.TRADE:
            if asset is None or liability is None:
                raise RuntimeError("Asset and liability must be set for trade")
            asset.update_value(asset.value + amount)
            liability.update_value(liability.value - amount)
        else:
            raise RuntimeError("Unknown transaction type")
        self.status = TransactionStatus.COMPLETED

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self.id!r}, type={self.type.name}, "
            f"amount={self.amount}, status={self.status.name})"
        )