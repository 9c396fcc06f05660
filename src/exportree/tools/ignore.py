"""Ignore patterns for directory entries."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union


# Entry names always skipped (regular expression fragments)
DEFAULT_IGNORE_PATTERNS = [
    "node_modules", ".git", ".husky", "coverage", ".next",
]


class InvalidIgnorePattern(ValueError):
    """An ignore pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid ignore pattern {pattern!r}: {reason}")
        self.pattern = pattern


def should_ignore(name: str, patterns: Iterable[Union[str, re.Pattern]]) -> bool:
    """Check if an entry name matches any pattern anywhere in the name."""
    return any(re.search(pattern, name) for pattern in patterns)


@dataclass(frozen=True)
class IgnoreRules:
    """Compiled ignore patterns, defaults first."""
    patterns: tuple[re.Pattern, ...]

    @classmethod
    def from_patterns(cls, extra: Optional[Iterable[str]] = None) -> "IgnoreRules":
        """Build rules from the defaults plus user-supplied patterns.

        Raises:
            InvalidIgnorePattern: If a pattern does not compile
        """
        compiled = []
        for pattern in [*DEFAULT_IGNORE_PATTERNS, *(extra or [])]:
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise InvalidIgnorePattern(pattern, str(e)) from e
        return cls(patterns=tuple(compiled))

    def matches(self, name: str) -> bool:
        return should_ignore(name, self.patterns)
