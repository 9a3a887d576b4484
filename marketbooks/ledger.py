"""Per-account ledger postings and balances."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone

from .ids import IDGenerator
from .journal import EntryType
from .numeric import Decimal


class LedgerEntry:
    """A single posting of an amount to one account."""

    _id_gen = IDGenerator("LEN", 12)

    def __init__(
        self,
        account_id: str,
        journal_entry_id: str,
        entry_type: EntryType,
        amount: Decimal,
    ) -> None:
        if not account_id:
            raise ValueError("Account ID cannot be empty")
        if not journal_entry_id:
            raise ValueError("Journal entry ID cannot be empty")
        amount = Decimal(amount)
        if amount <= Decimal(0):
            raise ValueError("Amount must be positive")
        self.id = self._id_gen.next()
        self.account_id = account_id
        self.journal_entry_id = journal_entry_id
        self.type = entry_type
        self.amount = amount
        self.timestamp = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return (
            f"LedgerEntry(id={self.id!r}, account_id={self.account_id!r}, "
            f"type={self.type.name}, amount={self.amount})"
        )


class Ledger:
    """Postings grouped by account, with debit-positive balances."""

    _id_gen = IDGenerator("LDG", 12)

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Ledger name cannot be empty")
        self.id = self._id_gen.next()
        self.name = name
        self._accounts: dict[str, list[LedgerEntry]] = defaultdict(list)

    def add_entry(self, entry: LedgerEntry) -> None:
        """Post an entry to its account."""
        if entry is None:
            raise ValueError("Entry cannot be null")
        self._accounts[entry.account_id].append(entry)

    def balance(self, account_id: str, as_of: datetime | None = None) -> Decimal:
        """Debits minus credits posted to the account up to as_of (default: now)."""
        if as_of is None:
            as_of = datetime.now(timezone.utc)
        total = Decimal(0)
        for entry in self._accounts.get(account_id, ()):
            if entry.timestamp <= as_of:
                if entry.type is EntryType.DEBIT:
                    total = total + entry.amount
                else:
                    total = total - entry.amount
        return total

    def entries(
        self,
        account_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[LedgerEntry]:
        """Postings for the account, optionally limited to [start, end]."""
        postings = self._accounts.get(account_id, ())
        return [
            e
            for e in postings
            if (start is None or e.timestamp >= start) and (end is None or e.timestamp <= end)
        ]