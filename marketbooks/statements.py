"""Income and cash flow statements built from ledger balances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TextIO

from .ledger import Ledger
from .numeric import Decimal
from .report import Report


@dataclass(frozen=True)
class StatementLine:
    """One account and the amount it contributes to a statement section."""

    account_id: str
    account_name: str
    amount: Decimal


class _TwoSectionStatement(Report):
    """A statement of positive balances from one account set and negative from another."""

    _title = ""
    _first_heading = ""
    _second_heading = ""
    _first_total = ""
    _second_total = ""
    _net_label = ""
    _RULE = "-" * 56

    def __init__(
        self,
        ledger: Ledger,
        first_accounts: Iterable[tuple[str, str]],
        second_accounts: Iterable[tuple[str, str]],
        show_empty_accounts: bool,
    ) -> None:
        self.ledger = ledger
        self.show_empty_accounts = show_empty_accounts
        self._first_accounts = tuple(first_accounts)
        self._second_accounts = tuple(second_accounts)
        self._first_lines, self._first_sum = self._collect(self._first_accounts, positive=True)
        self._second_lines, self._second_sum = self._collect(self._second_accounts, positive=False)

    def _collect(
        self, accounts: tuple[tuple[str, str], ...], positive: bool
    ) -> tuple[list[StatementLine], Decimal]:
        zero = Decimal(0)
        lines: list[StatementLine] = []
        total = Decimal(0)
        for account_id, account_name in accounts:
            balance = self.ledger.balance(account_id)
            if not self.show_empty_accounts and balance == zero:
                continue
            if positive and balance > zero:
                amount = balance
            elif not positive and balance < zero:
                amount = -balance
            else:
                continue
            lines.append(StatementLine(account_id, account_name, amount))
            total = total + amount
        return lines, total

    def _write_section(self, out: TextIO, heading: str, lines: list[StatementLine],
                       total_label: str, total: Decimal) -> None:
        out.write(heading + "\n")
        for line in lines:
            out.write(f"{line.account_id:<16}{line.account_name:<24}{str(line.amount):>16}\n")
        out.write(self._RULE + "\n")
        out.write(f"{total_label:<40}{str(total):>16}\n")
        out.write(self._RULE + "\n")

    def generate(self, out: TextIO) -> None:
        out.write(f"\n{self._title}\n")
        out.write(f"{'Account ID':<16}{'Account Name':<24}{'Amount':>16}\n")
        out.write(self._RULE + "\n")
        self._write_section(out, self._first_heading, self._first_lines,
                            self._first_total, self._first_sum)
        self._write_section(out, self._second_heading, self._second_lines,
                            self._second_total, self._second_sum)
        out.write(f"{self._net_label:<40}{str(self._first_sum - self._second_sum):>16}\n")


class IncomeStatement(_TwoSectionStatement):
    """Revenue accounts with positive balances less expense accounts with negative ones."""

    name = "Income Statement"
    _title = "INCOME STATEMENT"
    _first_heading = "REVENUE"
    _second_heading = "EXPENSES"
    _first_total = "Total Revenue"
    _second_total = "Total Expenses"
    _net_label = "Net Income"

    def __init__(
        self,
        ledger: Ledger,
        revenue_accounts: Iterable[tuple[str, str]],
        expense_accounts: Iterable[tuple[str, str]],
        show_empty_accounts: bool = False,
    ) -> None:
        super().__init__(ledger, revenue_accounts, expense_accounts, show_empty_accounts)

    @property
    def revenue_lines(self) -> list[StatementLine]:
        return list(self._first_lines)

    @property
    def expense_lines(self) -> list[StatementLine]:
        return list(self._second_lines)

    @property
    def total_revenue(self) -> Decimal:
        return self._first_sum

    @property
    def total_expenses(self) -> Decimal:
        return self._second_sum

    @property
    def net_income(self) -> Decimal:
        return self._first_sum - self._second_sum

    def generate(self, out: TextIO) -> None:
        super().generate(out)


class CashFlowStatement(_TwoSectionStatement):
    """Inflow accounts with positive balances less outflow accounts with negative ones."""

    name = "Cash Flow Statement"
    _title = "CASH FLOW STATEMENT"
    _first_heading = "CASH INFLOWS"
    _second_heading = "CASH OUTFLOWS"
    _first_total = "Total Inflows"
    _second_total = "Total Outflows"
    _net_label = "Net Cash Flow"

    def __init__(
        self,
        ledger: Ledger,
        inflow_accounts: Iterable[tuple[str, str]],
        outflow_accounts: Iterable[tuple[str, str]],
        show_empty_accounts: bool = False,
    ) -> None:
        super().__init__(ledger, inflow_accounts, outflow_accounts, show_empty_accounts)

    @property
    def inflow_lines(self) -> list[StatementLine]:
        return list(self._first_lines)

    @property
    def outflow_lines(self) -> list[StatementLine]:
        return list(self._second_lines)

    @property
    def total_inflows(self) -> Decimal:
        return self._first_sum

    @property
    def total_outflows(self) -> Decimal:
        return self._second_sum

    @property
    def net_cash_flow(self) -> Decimal:
        return self._first_sum - self._second_sum

    def generate(self, out: TextIO) -> None:
        super().generate(out)