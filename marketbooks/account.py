"""Accounts that own wallets, assets, liabilities and contracts."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, TypeVar

from .ids import IDGenerator
from .numeric import Decimal

if TYPE_CHECKING:
    from .contract import Contract
    from .holdings import Asset, Liability
    from .wallet import Wallet

_T = TypeVar("_T")


class AccountType(enum.Enum):
    """Accounting classification of an account."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"


_DEBIT_NORMAL = frozenset({AccountType.ASSET, AccountType.EXPENSE})


def _register(store: dict[str, _T], item: _T | None, kind: str) -> None:
    if item is None:
        raise ValueError(f"{kind} cannot be null")
    item_id = item.id  # type: ignore[attr-defined]
    if item_id in store:
        raise ValueError(f"{kind} with ID {item_id} already exists")
    store[item_id] = item


def _unregister(store: dict[str, _T], item_id: str, kind: str) -> None:
    try:
        del store[item_id]
    except KeyError:
        raise KeyError(f"{kind} with ID {item_id} not found") from None


class Account:
    """A named account of a given type holding its financial items by ID."""

    _id_gen = IDGenerator("ACC", 9)

    def __init__(self, name: str, account_type: AccountType) -> None:
        if not name:
            raise ValueError("Account name cannot be empty")
        self.id = self._id_gen.next()
        self.name = name
        self.type = account_type
        self._wallets: dict[str, Wallet] = {}
        self._assets: dict[str, Asset] = {}
        self._liabilities: dict[str, Liability] = {}
        self._contracts: dict[str, Contract] = {}

    @property
    def wallets(self) -> dict[str, Wallet]:
        return dict(self._wallets)

    @property
    def assets(self) -> dict[str, Asset]:
        return dict(self._assets)

    @property
    def liabilities(self) -> dict[str, Liability]:
        return dict(self._liabilities)

    @property
    def contracts(self) -> dict[str, Contract]:
        return dict(self._contracts)

    def add_wallet(self, wallet: Wallet) -> None:
        """Attach a wallet; its ID must be new to this account."""
        _register(self._wallets, wallet, "Wallet")

    def get_wallet(self, wallet_id: str) -> Wallet | None:
        return self._wallets.get(wallet_id)

    def add_asset(self, asset: Asset) -> None:
        """Attach an asset; its ID must be new to this account."""
        _register(self._assets, asset, "Asset")

    def remove_asset(self, asset_id: str) -> None:
        _unregister(self._assets, asset_id, "Asset")

    def get_asset(self, asset_id: str) -> Asset | None:
        return self._assets.get(asset_id)

    def add_liability(self, liability: Liability) -> None:
        """Attach a liability; its ID must be new to this account."""
        _register(self._liabilities, liability, "Liability")

    def remove_liability(self, liability_id: str) -> None:
        _unregister(self._liabilities, liability_id, "Liability")

    def get_liability(self, liability_id: str) -> Liability | None:
        return self._liabilities.get(liability_id)

    def add_contract(self, contract: Contract) -> None:
        """Attach a contract; its ID must be new to this account."""
        _register(self._contracts, contract, "Contract")

    def get_contract(self, contract_id: str) -> Contract | None:
        return self._contracts.get(contract_id)

    def balance(self) -> Decimal:
        """Sum of wallet net worths, negated for credit-normal account types."""
        total = Decimal(0)
        for wallet in self._wallets.values():
            total = total + wallet.net_worth()
        return total if self.type in _DEBIT_NORMAL else Decimal(0) - total

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, name={self.name!r}, type={self.type.name})"