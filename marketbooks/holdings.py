"""Assets and liabilities whose current value comes from a valuation strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .ids import IDGenerator
from .numeric import Decimal


class AssetStrategy(ABC):
    """A way of valuing an asset."""

    @abstractmethod
    def calculate_value(self, asset: Asset) -> Decimal:
        """Return the asset's current value."""


class CashAssetStrategy(AssetStrategy):
    """Values cash at its recorded value."""

    def calculate_value(self, asset: Asset) -> Decimal:
        return asset.value


class StockAssetStrategy(AssetStrategy):
    """Values a stock at its recorded value."""

    def calculate_value(self, asset: Asset) -> Decimal:
        return asset.value


class BondAssetStrategy(AssetStrategy):
    """Values a bond at its recorded value."""

    def calculate_value(self, asset: Asset) -> Decimal:
        return asset.value


class CommodityAssetStrategy(AssetStrategy):
    """Values a commodity at its recorded value."""

    def calculate_value(self, asset: Asset) -> Decimal:
        return asset.value


class DerivativeAssetStrategy(AssetStrategy):
    """Values a derivative at its recorded value."""

    def calculate_value(self, asset: Asset) -> Decimal:
        return asset.value


class LiabilityStrategy(ABC):
    """A way of valuing a liability."""

    @abstractmethod
    def calculate_value(self, liability: Liability) -> Decimal:
        """Return the liability's current value."""


class LoanLiabilityStrategy(LiabilityStrategy):
    """Values a loan at its recorded value."""

    def calculate_value(self, liability: Liability) -> Decimal:
        return liability.value


class MarginLiabilityStrategy(LiabilityStrategy):
    """Values a margin position at its recorded value."""

    def calculate_value(self, liability: Liability) -> Decimal:
        return liability.value


_DEFAULT_ASSET_STRATEGY = CashAssetStrategy()
_DEFAULT_LIABILITY_STRATEGY = LoanLiabilityStrategy()


def _non_negative(value: Decimal, kind: str) -> Decimal:
    value = Decimal(value)
    if value < Decimal(0):
        raise ValueError(f"{kind} value cannot be negative")
    return value


class Asset:
    """A held asset with a non-negative recorded value."""

    _id_gen = IDGenerator("AST", 9)

    def __init__(
        self,
        asset_type: str,
        value: Decimal,
        strategy: AssetStrategy | None = None,
    ) -> None:
        if not asset_type:
            raise ValueError("Asset type cannot be empty")
        self.value = _non_negative(value, "Asset")
        self.id = self._id_gen.next()
        self.type = asset_type
        self.strategy = strategy

    def update_value(self, new_value: Decimal) -> None:
        """Replace the recorded value."""
        self.value = _non_negative(new_value, "Asset")

    def current_value(self) -> Decimal:
        """Value according to the strategy, or the cash strategy if none is set."""
        return (self.strategy or _DEFAULT_ASSET_STRATEGY).calculate_value(self)

    def __repr__(self) -> str:
        return f"Asset(id={self.id!r}, type={self.type!r}, value={self.value})"


class Liability:
    """An owed liability with a non-negative recorded value."""

    _id_gen = IDGenerator("LIA", 9)

    def __init__(
        self,
        liability_type: str,
        value: Decimal,
        strategy: LiabilityStrategy | None = None,
    ) -> None:
        if not liability_type:
            raise ValueError("Liability type cannot be empty")
        self.value = _non_negative(value, "Liability")
        self.id = self._id_gen.next()
        self.type = liability_type
        self.strategy = strategy

    def update_value(self, new_value: Decimal) -> None:
        """Replace the recorded value."""
        self.value = _non_negative(new_value, "Liability")

    def current_value(self) -> Decimal:
        """Value according to the strategy, or the loan strategy if none is set."""
        return (self.strategy or _DEFAULT_LIABILITY_STRATEGY).calculate_value(self)

    def __repr__(self) -> str:
        return f"Liability(id={self.id!r}, type={self.type!r}, value={self.value})"