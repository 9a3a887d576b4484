"""Command that books a few demo transactions and prints the standard reports."""

from __future__ import annotations

import argparse
import sys

from .journal import EntryLine, EntryType, Journal, JournalEntry
from .ledger import Ledger, LedgerEntry
from .numeric import Decimal
from .report import TrialBalance
from .statements import CashFlowStatement, IncomeStatement

ACCOUNTS = (
    ("ACC001", "Cash"),
    ("ACC002", "Accounts Receivable"),
    ("ACC003", "Revenue"),
    ("ACC004", "Expenses"),
    ("ACC005", "Accounts Payable"),
)
REVENUE_ACCOUNTS = (("ACC003", "Revenue"),)
EXPENSE_ACCOUNTS = (("ACC004", "Expenses"),)
INFLOW_ACCOUNTS = (("ACC001", "Cash"),)
OUTFLOW_ACCOUNTS = (("ACC001", "Cash"),)


def build_demo_ledger() -> Ledger:
    """Journal a revenue and an expense transaction and post them to a new ledger."""
    ledger = Ledger("Main Ledger")
    journal = Journal("Main Journal")

    journal.add_entry(
        JournalEntry(
            "TRX001",
            [
                EntryLine("ACC001", EntryType.DEBIT, Decimal(1000), "Revenue received"),
                EntryLine("ACC003", EntryType.CREDIT, Decimal(1000), "Revenue recorded"),
            ],
            "Revenue transaction",
        )
    )
    journal.add_entry(
        JournalEntry(
            "TRX002",
            [
                EntryLine("ACC004", EntryType.DEBIT, Decimal(500), "Expense incurred"),
                EntryLine("ACC001", EntryType.CREDIT, Decimal(500), "Cash paid for expense"),
            ],
            "Expense transaction",
        )
    )

    for entry in journal.entries:
        for line in entry.entries:
            ledger.add_entry(LedgerEntry(line.account_id, entry.id, line.type, line.amount))
    return ledger


def main(argv: list[str] | None = None) -> int:
    """Print the trial balance, income statement and cash flow statement of the demo books."""
    parser = argparse.ArgumentParser(
        prog="marketbooks",
        description="Book demo transactions and print accounting reports.",
    )
    parser.parse_args(argv)

    ledger = build_demo_ledger()
    out = sys.stdout

    print("Trial Balance Report:", file=out)
    TrialBalance(ledger, ACCOUNTS, False).generate(out)

    print("\nIncome Statement Report:", file=out)
    IncomeStatement(ledger, REVENUE_ACCOUNTS, EXPENSE_ACCOUNTS, False).generate(out)

    print("\nCash Flow Statement Report:", file=out)
    CashFlowStatement(ledger, INFLOW_ACCOUNTS, OUTFLOW_ACCOUNTS, False).generate(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())