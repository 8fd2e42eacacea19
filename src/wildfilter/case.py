"""Case sensitivity policy for wildcard matching."""

from __future__ import annotations

import os
from enum import Enum


def _host_case_sensitive() -> bool:
    return os.name != "nt"


class CaseMode(Enum):
    """How letter case is treated when comparing literal characters.

    ``SYSTEM`` follows the host file system convention: case-insensitive
    on Windows, case-sensitive everywhere else.
    """

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"
    SYSTEM = "system"

    def resolve(self) -> CaseMode:
        """Return ``SENSITIVE`` or ``INSENSITIVE``, never ``SYSTEM``."""
        if self is CaseMode.SYSTEM:
            return CaseMode.SENSITIVE if _host_case_sensitive() else CaseMode.INSENSITIVE
        return self

    @classmethod
    def value_of(cls, mode: CaseMode | None) -> CaseMode:
        """Return *mode*, or ``SENSITIVE`` for ``None``."""
        return mode if mode is not None else cls.SENSITIVE


def fold(char: str) -> str:
    """Fold a single character for case-insensitive comparison.

    ``str.casefold`` is idempotent, so folding twice equals folding once.
    The result may be longer than one character (``"ß"`` folds to
    ``"ss"``); callers compare folded characters, never index into them.
    """
    return char.casefold()


def chars_equal(a: str, b: str, case_mode: CaseMode) -> bool:
    """Compare two single characters under a resolved *case_mode*."""
    if a == b:
        return True
    if case_mode is CaseMode.SENSITIVE:
        return False
    return fold(a) == fold(b)
