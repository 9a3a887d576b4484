"""A balance sheet of asset, liability and equity accounts as of a point in time."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .ids import IDGenerator
from .ledger import Ledger
from .numeric import Decimal


@dataclass(frozen=True)
class AccountBalance:
    """An account's ledger balance as listed on a balance sheet."""

    account_id: str
    account_name: str
    balance: Decimal
    is_debit: bool


@dataclass
class Section:
    """A named group of account balances and their total."""

    name: str
    accounts: list[AccountBalance] = field(default_factory=list)
    total: Decimal = field(default_factory=lambda: Decimal(0))

    def recalculate(self) -> None:
        """Set the total to the sum of the listed balances."""
        total = Decimal(0)
        for account in self.accounts:
            total = total + account.balance
        self.total = total


class BalanceSheet:
    """Assets, liabilities and equity read from a ledger as of a given time."""

    _id_gen = IDGenerator("BSH", 12)

    def __init__(self, name: str, ledger: Ledger, as_of: datetime) -> None:
        if not name:
            raise ValueError("BalanceSheet name cannot be empty")
        if ledger is None:
            raise ValueError("Ledger cannot be null")
        self.id = self._id_gen.next()
        self.name = name
        self.ledger = ledger
        self.as_of = as_of
        self.assets = Section("Assets")
        self.liabilities = Section("Liabilities")
        self.equity = Section("Equity")
        self.account_types: dict[str, bool] = {}

    def _add(self, section: Section, account_id: str, account_name: str, is_debit: bool) -> None:
        balance = self.ledger.balance(account_id, self.as_of)
        section.accounts.append(AccountBalance(account_id, account_name, balance, is_debit))
        self.account_types[account_id] = is_debit
        for each in (self.assets, self.liabilities, self.equity):
            each.recalculate()

    def add_asset_account(self, account_id: str, account_name: str, is_debit: bool = True) -> None:
        """List an account under assets."""
        self._add(self.assets, account_id, account_name, is_debit)

    def add_liability_account(
        self, account_id: str, account_name: str, is_debit: bool = False
    ) -> None:
        """List an account under liabilities."""
        self._add(self.liabilities, account_id, account_name, is_debit)

    def add_equity_account(
        self, account_id: str, account_name: str, is_debit: bool = False
    ) -> None:
        """List an account under equity."""
        self._add(self.equity, account_id, account_name, is_debit)

    @property
    def total_assets(self) -> Decimal:
        return self.assets.total

    @property
    def total_liabilities(self) -> Decimal:
        return self.liabilities.total

    @property
    def total_equity(self) -> Decimal:
        return self.equity.total

    def is_balanced(self) -> bool:
        """Whether assets equal liabilities plus equity."""
        return self.assets.total == self.liabilities.total + self.equity.total