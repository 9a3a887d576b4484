"""The report interface and the trial balance report."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, TextIO

from .ledger import Ledger
from .numeric import Decimal


class Report(ABC):
    """A report that writes itself as text to a stream."""

    name: str = ""

    @abstractmethod
    def generate(self, out: TextIO) -> None:
        """Write the report to the text stream."""

    def render(self) -> str:
        """Return the report text as a string."""
        buffer = io.StringIO()
        self.generate(buffer)
        return buffer.getvalue()


@dataclass(frozen=True)
class TrialBalanceLine:
    """One account's debit or credit balance in a trial balance."""

    account_id: str
    account_name: str
    debit: Decimal
    credit: Decimal


class TrialBalance(Report):
    """Debit and credit balances of the listed accounts, with their totals."""

    name = "Trial Balance"
    _RULE = "-" * 72

    def __init__(
        self,
        ledger: Ledger,
        accounts: Iterable[tuple[str, str]],
        show_empty_accounts: bool = False,
    ) -> None:
        self.ledger = ledger
        self.accounts = tuple(accounts)
        self.show_empty_accounts = show_empty_accounts
        self.lines: list[TrialBalanceLine] = []
        self.total_debits = Decimal(0)
        self.total_credits = Decimal(0)
        self._compute()

    def _compute(self) -> None:
        zero = Decimal(0)
        for account_id, account_name in self.accounts:
            balance = self.ledger.balance(account_id)
            if not self.show_empty_accounts and balance == zero:
                continue
            if balance >= zero:
                line = TrialBalanceLine(account_id, account_name, balance, Decimal(0))
                self.total_debits = self.total_debits + balance
            else:
                line = TrialBalanceLine(account_id, account_name, Decimal(0), -balance)
                self.total_credits = self.total_credits + (-balance)
            self.lines.append(line)

    def is_balanced(self) -> bool:
        """Whether total debits equal total credits."""
        return self.total_debits == self.total_credits

    def generate(self, out: TextIO) -> None:
        out.write("\nTRIAL BALANCE\n")
        out.write(f"{'Account ID':<16}{'Account Name':<24}{'Debit':>16}{'Credit':>16}\n")
        out.write(self._RULE + "\n")
        for line in self.lines:
            out.write(
                f"{line.account_id:<16}{line.account_name:<24}"
                f"{str(line.debit):>16}{str(line.credit):>16}\n"
            )
        out.write(self._RULE + "\n")
        out.write(
            f"{'TOTALS':<40}{str(self.total_debits):>16}{str(self.total_credits):>16}\n"
        )
        out.write(("BALANCED" if self.is_balanced() else "NOT BALANCED") + "\n")