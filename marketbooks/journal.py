"""Double-entry journal entries and the journal that indexes them."""

from __future__ import annotations

import enum
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from .ids import IDGenerator
from .numeric import Decimal


class EntryType(enum.Enum):
    """Side of a bookkeeping entry."""

    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class EntryLine:
    """One debit or credit line of a journal entry."""

    account_id: str
    type: EntryType
    amount: Decimal
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Decimal(self.amount))


class JournalEntry:
    """A balanced set of entry lines recorded for one transaction."""

    _id_gen = IDGenerator("JEN", 12)

    def __init__(
        self,
        transaction_id: str,
        entries: Iterable[EntryLine],
        description: str = "",
    ) -> None:
        lines = tuple(entries)
        if not lines:
            raise ValueError("Journal entry must have at least one entry")

        total_debits = Decimal(0)
        total_credits = Decimal(0)
        for line in lines:
            if line.amount <= Decimal(0):
                raise ValueError("Entry amount must be positive")
            if line.type is EntryType.DEBIT:
                total_debits = total_debits + line.amount
            else:
                total_credits = total_credits + line.amount
        if total_debits != total_credits:
            raise ValueError("Debits and credits must be equal")

        self.id = self._id_gen.next()
        self.transaction_id = transaction_id
        self.entries = lines
        self.description = description
        self.timestamp = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"JournalEntry(id={self.id!r}, transaction_id={self.transaction_id!r})"


class Journal:
    """An ordered collection of journal entries indexed by account and transaction."""

    _id_gen = IDGenerator("JNL", 12)

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Journal name cannot be empty")
        self.id = self._id_gen.next()
        self.name = name
        self._entries: list[JournalEntry] = []
        self._by_account: dict[str, list[int]] = defaultdict(list)
        self._by_transaction: dict[str, list[int]] = defaultdict(list)

    @property
    def entries(self) -> list[JournalEntry]:
        """All entries in the order they were added."""
        return list(self._entries)

    def add_entry(self, entry: JournalEntry) -> None:
        """Record an entry and index it."""
        if entry is None:
            raise ValueError("Entry cannot be null")
        self._entries.append(entry)
        index = len(self._entries) - 1
        for line in entry.entries:
            self._by_account[line.account_id].append(index)
        self._by_transaction[entry.transaction_id].append(index)

    def entries_by_account(self, account_id: str) -> list[JournalEntry]:
        """Entries touching the account, once per line that touches it."""
        return [self._entries[i] for i in self._by_account.get(account_id, ())]

    def entries_by_transaction(self, transaction_id: str) -> list[JournalEntry]:
        """Entries recorded for the transaction."""
        return [self._entries[i] for i in self._by_transaction.get(transaction_id, ())]

    def entries_by_date_range(self, start: datetime, end: datetime) -> list[JournalEntry]:
        """Entries whose timestamp lies within [start, end]."""
        return [e for e in self._entries if start <= e.timestamp <= end]