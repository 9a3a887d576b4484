"""Contracts between two accounts, described by key/value terms."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .ids import IDGenerator
from .numeric import Decimal

if TYPE_CHECKING:
    from .account import Account


class ContractState(enum.Enum):
    """Lifecycle state of a contract."""

    DRAFT = "draft"
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DEFAULTED = "defaulted"


class Contract:
    """An agreement of a given type between two distinct accounts."""

    _id_gen = IDGenerator("CNT", 9)
    REQUIRED_TERMS = ("amount", "currency")

    def __init__(self, contract_type: str, party1: Account, party2: Account) -> None:
        if not contract_type:
            raise ValueError("Contract type cannot be empty")
        if party1 is None or party2 is None:
            raise ValueError("Both parties must be valid")
        if party1 is party2:
            raise ValueError("Parties must be different accounts")
        self.id = self._id_gen.next()
        self.type = contract_type
        self.party1 = party1
        self.party2 = party2
        self.state = ContractState.DRAFT
        self._terms: dict[str, str] = {}

    @property
    def terms(self) -> dict[str, str]:
        return dict(self._terms)

    def add_term(self, key: str, value: str) -> None:
        """Set a term, replacing any earlier value."""
        self._terms[key] = value

    def get_term(self, key: str) -> str:
        """Return a term's value; raises KeyError if it is not set."""
        return self._terms[key]

    def validate_terms(self) -> bool:
        """Whether the required terms are present and their values are valid."""
        return self._has_required_terms() and self._validate_term_values()

    def _has_required_terms(self) -> bool:
        return bool(self._terms) and all(key in self._terms for key in self.REQUIRED_TERMS)

    def _validate_term_values(self) -> bool:
        if "amount" in self._terms:
            try:
                amount = Decimal(self._terms["amount"])
            except (ValueError, TypeError):
                return False
            if amount <= Decimal(0):
                return False
        return True

    def __repr__(self) -> str:
        return f"Contract(id={self.id!r}, type={self.type!r}, state={self.state.name})"