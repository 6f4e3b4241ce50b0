# mklint/settings.py
"""
Run-time settings shared by every rule in a lint run.

Settings come from the environment first and command-line flags second:

    NO_COLOR       any value disables colour (see https://no-color.org)
    MKLINT_RULES   comma-separated rule names to run instead of all rules
"""

from __future__ import annotations

import dataclasses
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional, TextIO, Tuple

OUTPUT_FORMATS: Tuple[str, ...] = ("text", "json")


@dataclass(frozen=True)
class LintSettings:
    """
    Attributes
    ----------
    no_color      : suppress terminal colour codes in text output
    rules         : names of the rules to run; empty means all registered
    output_format : "text" (human readable) or "json" (one object per line)
    """

    no_color: bool = False
    rules: Tuple[str, ...] = ()
    output_format: str = "text"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, "
                f"got {self.output_format!r}"
            )

    @classmethod
    def from_env(
        cls,
        stream: Optional[TextIO] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LintSettings":
        """Build settings from *environ* (default ``os.environ``).

        Colour is disabled when ``NO_COLOR`` is present or *stream*
        (default ``sys.stdout``) is not a terminal.
        """
        env = os.environ if environ is None else environ
        stream = sys.stdout if stream is None else stream
        try:
            is_tty = hasattr(stream, "isatty") and stream.isatty()
        except ValueError:
            # closed stream
            is_tty = False
        rules = tuple(
            name.strip()
            for name in env.get("MKLINT_RULES", "").split(",")
            if name.strip()
        )
        return cls(no_color=not is_tty or "NO_COLOR" in env, rules=rules)

    def with_overrides(self, **changes: Any) -> "LintSettings":
        """Return a copy with *changes* applied; ``None`` values are skipped."""
        return dataclasses.replace(
            self, **{k: v for k, v in changes.items() if v is not None}
        )


__all__ = ["LintSettings", "OUTPUT_FORMATS"]
