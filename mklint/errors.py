# mklint/errors.py
"""
Error types raised by the mklint pipeline.

Hierarchy::

    MklintError (base)
    ├── TokenizeError            - a logical line could not be classified
    ├── UnknownConditionalError  - unrecognised ``.keyword`` directive
    ├── UnknownModifierError     - unrecognised assignment operator
    └── UnknownRuleError         - rule name not present in a registry

Rules themselves never raise; the errors here all originate before a rule
runs (reading, tokenizing) or while selecting which rules to run.
"""

from __future__ import annotations

from typing import Optional


class MklintError(Exception):
    """Base class for every error raised by mklint."""


class TokenizeError(MklintError):
    """Raised when the tokenizer cannot classify a logical line."""

    def __init__(self, message: str, filename: str = "<stdin>",
                 line: Optional[int] = None) -> None:
        self.message = message
        self.filename = filename
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.filename}:{self.line}: {self.message}"
        return f"{self.filename}: {self.message}"


class UnknownConditionalError(MklintError):
    """Raised for a directive keyword that is not a known conditional."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"unknown conditional keyword '{keyword}'")


class UnknownModifierError(MklintError):
    """Raised for an assignment operator that is not a known modifier."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"unknown assignment operator '{operator}'")


class UnknownRuleError(MklintError):
    """Raised when a rule name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown rule '{name}'")


__all__ = [
    "MklintError",
    "TokenizeError",
    "UnknownConditionalError",
    "UnknownModifierError",
    "UnknownRuleError",
]
