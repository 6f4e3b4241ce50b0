"""
mklint — lint rules for BSD make build configurations
=====================================================

Quick start
-----------
>>> from mklint import tokenize, find_clones
>>> find_clones(tokenize("A=1\\n.if ${X}\\nA=2\\nB=1\\n.endif\\nB=2\\n"))
['A', 'B']

Package layout
--------------
::

    mklint/
    ├── __init__.py        ← this file
    ├── __main__.py        command line (``mklint`` / ``python -m mklint``)
    ├── clones.py          lint.clones rule
    ├── conditional.py     directive keywords and their scoping role
    ├── errors.py
    ├── output.py          OutputSink and colour helper
    ├── rules.py           Rule, RuleRegistry, RuleRunner
    ├── settings.py        LintSettings
    ├── tokenizer.py       parsimonious line grammar
    ├── tokens.py          token variants
    └── variable.py        assignment modifiers
"""

from __future__ import annotations

import logging

from mklint.conditional import ConditionalKind
from mklint.errors import (
    MklintError,
    TokenizeError,
    UnknownConditionalError,
    UnknownModifierError,
    UnknownRuleError,
)
from mklint.output import OutputSink
from mklint.rules import (
    DEFAULT_REGISTRY,
    Rule,
    RuleContext,
    RuleRegistry,
    RuleRunner,
    register_rule,
)
from mklint.settings import LintSettings
from mklint.tokenizer import tokenize, tokenize_file
from mklint.tokens import (
    AssignmentToken,
    BlankToken,
    CommandToken,
    CommentToken,
    ConditionalToken,
    LineRange,
    TargetToken,
    Token,
)
from mklint.variable import Modifier, Variable

# Rule modules register themselves on import.
from mklint.clones import ClonesRule, find_clones, report_clones

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AssignmentToken",
    "BlankToken",
    "ClonesRule",
    "CommandToken",
    "CommentToken",
    "ConditionalKind",
    "ConditionalToken",
    "DEFAULT_REGISTRY",
    "LineRange",
    "LintSettings",
    "MklintError",
    "Modifier",
    "OutputSink",
    "Rule",
    "RuleContext",
    "RuleRegistry",
    "RuleRunner",
    "TargetToken",
    "Token",
    "TokenizeError",
    "UnknownConditionalError",
    "UnknownModifierError",
    "UnknownRuleError",
    "Variable",
    "find_clones",
    "register_rule",
    "report_clones",
    "tokenize",
    "tokenize_file",
]
