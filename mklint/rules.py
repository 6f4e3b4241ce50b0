# mklint/rules.py
"""
Rule framework: base class, registry and runner.

Architecture
────────────

  ┌──────────────────────────────────────────────────────┐
  │                     RuleRunner                       │
  │                                                      │
  │   tokens ──▶ rule.check(tokens, ctx) ──▶ result      │
  │                                           │          │
  │              collect() ◀──────────────────┤          │
  │              (raw result, no output)      │          │
  │                                           ▼          │
  │              run() ──▶ rule.report(result, ctx)      │
  │                          │                           │
  │                          ▼                           │
  │                      OutputSink                      │
  └──────────────────────────────────────────────────────┘

Every rule separates *finding* from *telling*: ``check()`` is a pure
reduction over the token list, ``report()`` formats a result onto the
context's sink.  A rule that needs another rule's raw answer asks the
runner to ``collect()`` it instead of parsing that rule's text output.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Optional,
    Sequence,
    Type,
    TypeVar,
)

from mklint.errors import UnknownRuleError
from mklint.output import OutputSink
from mklint.settings import LintSettings
from mklint.tokens import Token

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════════
#  CONTEXT
# ═════════════════════════════════════════════════════════════════════════

@dataclass
class RuleContext:
    """
    Per-file context handed to every rule.

    Attributes
    ----------
    filename : name used in logs and machine-readable output
    settings : LintSettings for this run
    output   : sink that ``report()`` writes to
    results  : raw results of rules that already ran on this file, by name
    """
    filename: str = "<stdin>"
    settings: LintSettings = field(default_factory=LintSettings)
    output: OutputSink = field(default_factory=OutputSink.to_string)
    results: Dict[str, Any] = field(default_factory=dict)


# ═════════════════════════════════════════════════════════════════════════
#  RULE BASE CLASS
# ═════════════════════════════════════════════════════════════════════════

class Rule(ABC):
    """
    Abstract base class for all lint rules.

    Subclass Contract
    ─────────────────
      - Override ``name`` and ``description``
      - Implement ``check()`` (no output, no side effects) and ``report()``
      - ``has_findings()`` decides whether a result counts towards a
        non-zero exit status; the default treats any truthy result as one
    """

    name: ClassVar[str] = "base-rule"
    description: ClassVar[str] = ""

    @abstractmethod
    def check(self, tokens: Sequence[Token], ctx: RuleContext) -> Any:
        ...

    @abstractmethod
    def report(self, result: Any, ctx: RuleContext) -> None:
        ...

    def has_findings(self, result: Any) -> bool:
        return bool(result)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.name}'>"


# ═════════════════════════════════════════════════════════════════════════
#  REGISTRY
# ═════════════════════════════════════════════════════════════════════════

class RuleRegistry:
    """
    Registry of available rules, keyed by rule name.

    >>> from mklint.clones import ClonesRule
    >>> registry = RuleRegistry()
    >>> registry.register(ClonesRule)
    >>> registry.get_by_name("lint.clones")
    <class 'mklint.clones.ClonesRule'>
    """

    def __init__(self) -> None:
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        self._rules[rule_cls.name] = rule_cls

    def unregister(self, name: str) -> None:
        self._rules.pop(name, None)

    def get_by_name(self, name: str) -> Type[Rule]:
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def get_all(self) -> List[Type[Rule]]:
        return [self._rules[name] for name in self.names]

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def names(self) -> List[str]:
        return sorted(self._rules)


DEFAULT_REGISTRY = RuleRegistry()

_R = TypeVar("_R", bound=Type[Rule])


def register_rule(rule_cls: _R) -> _R:
    """Class decorator adding a rule to :data:`DEFAULT_REGISTRY`."""
    DEFAULT_REGISTRY.register(rule_cls)
    return rule_cls


# ═════════════════════════════════════════════════════════════════════════
#  RUNNER
# ═════════════════════════════════════════════════════════════════════════

class RuleRunner:
    """
    Runs rules over a token list.

    Parameters for constructor
    ─────────────────────────
    registry : RuleRegistry — source of rule classes (default: built-ins)
    settings : LintSettings — shared by every rule in the run
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        settings: Optional[LintSettings] = None,
    ) -> None:
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.settings = settings if settings is not None else LintSettings()

    def select(self, names: Optional[Sequence[str]] = None) -> List[Type[Rule]]:
        """Resolve rule names; ``None``/empty falls back to settings, then all."""
        names = names or self.settings.rules
        if not names:
            return self.registry.get_all()
        return [self.registry.get_by_name(name) for name in names]

    def collect(
        self,
        tokens: Sequence[Token],
        name: str,
        filename: str = "<stdin>",
    ) -> Any:
        """Return rule *name*'s raw result for *tokens*; writes nothing."""
        rule = self.registry.get_by_name(name)()
        ctx = RuleContext(filename=filename, settings=self.settings)
        return rule.check(tokens, ctx)

    def run(
        self,
        tokens: Sequence[Token],
        sink: OutputSink,
        rules: Optional[Sequence[str]] = None,
        filename: str = "<stdin>",
    ) -> Dict[str, Any]:
        """Check and report every selected rule; return results by name."""
        ctx = RuleContext(filename=filename, settings=self.settings, output=sink)
        for rule_cls in self.select(rules):
            rule = rule_cls()
            t0 = time.monotonic()
            result = rule.check(tokens, ctx)
            ctx.results[rule.name] = result
            rule.report(result, ctx)
            logger.debug(
                "%s: %s finished in %.2fms", filename, rule.name,
                (time.monotonic() - t0) * 1000.0,
            )
        return ctx.results

    def has_findings(self, results: Dict[str, Any]) -> bool:
        return any(
            self.registry.get_by_name(name)().has_findings(result)
            for name, result in results.items()
        )


__all__ = [
    "Rule",
    "RuleContext",
    "RuleRegistry",
    "RuleRunner",
    "DEFAULT_REGISTRY",
    "register_rule",
]
