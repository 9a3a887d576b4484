from datetime import datetime, timedelta, timezone

import pytest

from marketbooks.journal import EntryLine, EntryType, Journal, JournalEntry
from marketbooks.numeric import Decimal


def _revenue_lines(amount=1000):
    return [
        EntryLine("ACC001", EntryType.DEBIT, Decimal(amount), "Revenue received"),
        EntryLine("ACC003", EntryType.CREDIT, Decimal(amount), "Revenue recorded"),
    ]


def test_entry_line_coerces_amount():
    line = EntryLine("ACC001", EntryType.DEBIT, 250)
    assert line.amount == Decimal(250)
    assert line.description == ""


def test_journal_entry_fields():
    entry = JournalEntry("TRX001", _revenue_lines(), "Revenue transaction")
    assert entry.transaction_id == "TRX001"
    assert entry.description == "Revenue transaction"
    assert entry.id.startswith("JEN")
    assert len(entry.id) == 15
    assert [line.account_id for line in entry.entries] == ["ACC001", "ACC003"]


def test_journal_entry_ids_are_unique():
    a = JournalEntry("T1", _revenue_lines())
    b = JournalEntry("T2", _revenue_lines())
    assert a.id != b.id
    assert int(b.id[3:]) > int(a.id[3:])


def test_empty_entry_rejected():
    with pytest.raises(ValueError, match="at least one"):
        JournalEntry("T", [])


@pytest.mark.parametrize("amount", [0, -5])
def test_non_positive_amount_rejected(amount):
    lines = [
        EntryLine("A", EntryType.DEBIT, Decimal(amount)),
        EntryLine("B", EntryType.CREDIT, Decimal(amount)),
    ]
    with pytest.raises(ValueError, match="positive"):
        JournalEntry("T", lines)


def test_unbalanced_entry_rejected():
    lines = [
        EntryLine("A", EntryType.DEBIT, Decimal(100)),
        EntryLine("B", EntryType.CREDIT, Decimal(90)),
    ]
    with pytest.raises(ValueError, match="equal"):
        JournalEntry("T", lines)


def test_balanced_with_tolerance():
    lines = [
        EntryLine("A", EntryType.DEBIT, Decimal(0.1)),
        EntryLine("A", EntryType.DEBIT, Decimal(0.2)),
        EntryLine("B", EntryType.CREDIT, Decimal(0.3)),
    ]
    entry = JournalEntry("T", lines)
    assert len(entry.entries) == 3


def test_journal_requires_name():
    with pytest.raises(ValueError):
        Journal("")


def test_journal_name_and_id():
    journal = Journal("Main Journal")
    assert journal.name == "Main Journal"
    assert journal.id.startswith("JNL")


def test_add_entry_none_rejected():
    with pytest.raises(ValueError):
        Journal("J").add_entry(None)


def test_entries_preserve_order_and_are_copied():
    journal = Journal("J")
    first = JournalEntry("T1", _revenue_lines())
    second = JournalEntry("T2", _revenue_lines(500))
    journal.add_entry(first)
    journal.add_entry(second)
    listing = journal.entries
    assert listing == [first, second]
    listing.clear()
    assert journal.entries == [first, second]


def test_lookup_by_account_and_transaction():
    journal = Journal("J")
    revenue = JournalEntry("TRX001", _revenue_lines())
    expense = JournalEntry(
        "TRX002",
        [
            EntryLine("ACC004", EntryType.DEBIT, Decimal(500)),
            EntryLine("ACC001", EntryType.CREDIT, Decimal(500)),
        ],
    )
    journal.add_entry(revenue)
    journal.add_entry(expense)
    assert journal.entries_by_account("ACC001") == [revenue, expense]
    assert journal.entries_by_account("ACC004") == [expense]
    assert journal.entries_by_account("missing") == []
    assert journal.entries_by_transaction("TRX002") == [expense]
    assert journal.entries_by_transaction("nope") == []


def test_lookup_by_date_range():
    journal = Journal("J")
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    entry = JournalEntry("T", _revenue_lines())
    journal.add_entry(entry)
    after = datetime.now(timezone.utc) + timedelta(seconds=1)
    assert journal.entries_by_date_range(before, after) == [entry]
    assert journal.entries_by_date_range(after, after + timedelta(days=1)) == []