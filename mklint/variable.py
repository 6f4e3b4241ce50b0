# mklint/variable.py
"""Variable model: an assigned name plus the operator used to assign it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from mklint.errors import UnknownModifierError


class Modifier(Enum):
    """Assignment operators understood by bmake."""

    ASSIGN = "="
    APPEND = "+="
    OPTIONAL = "?="
    EXPAND = ":="
    SHELL = "!="

    @classmethod
    def from_operator(cls, operator: str) -> "Modifier":
        try:
            return _BY_OPERATOR[operator]
        except KeyError:
            raise UnknownModifierError(operator) from None

    @property
    def operator(self) -> str:
        return self.value


_BY_OPERATOR: Dict[str, Modifier] = {m.value: m for m in Modifier}


@dataclass(frozen=True, slots=True)
class Variable:
    """
    A variable as it appears on the left-hand side of an assignment.

    ``name`` is kept verbatim, so ``${PORTNAME}_DESC`` and ``FOO_DESC`` are
    different variables even if they would expand to the same thing.
    """

    name: str
    modifier: Modifier = Modifier.ASSIGN

    @property
    def is_plain(self) -> bool:
        """True for the unconditional set/overwrite operator ``=``."""
        return self.modifier is Modifier.ASSIGN


__all__ = ["Modifier", "Variable"]
