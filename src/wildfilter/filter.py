"""Entry filtering: select names matching any of several wildcard patterns."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import Any

from wildfilter.case import CaseMode
from wildfilter.matcher import wildcard_match
from wildfilter.walker import Visit

logger = logging.getLogger(__name__)


def _collect_patterns(wildcards: tuple[Any, ...]) -> tuple[str, ...]:
    """Normalize constructor arguments into an owned pattern tuple.

    Raises:
        ValueError: If no argument, a ``None`` collection or a ``None``
            pattern is given.
        TypeError: If a pattern is not a string.
    """
    if not wildcards:
        raise ValueError("wildcards: at least one pattern or a pattern collection is required")

    if len(wildcards) == 1 and not isinstance(wildcards[0], str):
        collection = wildcards[0]
        if collection is None:
            raise ValueError("wildcards: pattern collection must not be None")
        if not isinstance(collection, Iterable):
            raise TypeError(
                f"wildcards: expected a string or an iterable of strings, "
                f"got {type(collection).__name__}"
            )
        candidates = tuple(collection)
    else:
        candidates = wildcards

    for index, pattern in enumerate(candidates):
        if pattern is None:
            raise ValueError(f"wildcards[{index}]: pattern must not be None")
        if not isinstance(pattern, str):
            raise TypeError(
                f"wildcards[{index}]: expected str, got {type(pattern).__name__}"
            )
    return candidates


def _final_component(file: Any) -> str:
    """Return the final path component of a path, path-like or named object.

    A ``name`` that is not a path (the int descriptor of ``open(fd)``) gives
    the empty name.
    """
    if not isinstance(file, (str, os.PathLike)):
        file = getattr(file, "name", None)
        if not isinstance(file, (str, os.PathLike)):
            return ""
    return PurePath(os.fspath(file)).name


def _rebuild(patterns: tuple[str, ...], case_mode: CaseMode) -> WildcardFilter:
    return WildcardFilter(patterns, case_mode=case_mode)


class WildcardFilter:
    """Select entries whose name matches at least one wildcard pattern.

    Patterns are copied at construction and never change afterwards, so a
    single instance can be shared across threads and concurrent walks.

    Examples:
        >>> f = WildcardFilter("*.java", "*.class")
        >>> f.accept("Foo.class")
        True
        >>> WildcardFilter(["*.TXT"], case_mode=CaseMode.INSENSITIVE).accept("a.txt")
        True
    """

    __slots__ = ("_patterns", "_case_mode")

    _patterns: tuple[str, ...]
    _case_mode: CaseMode

    def __init__(self, *wildcards: Any, case_mode: CaseMode | None = None) -> None:
        """Initialize the filter.

        Args:
            *wildcards: A single pattern, several patterns, or one
                iterable of patterns. An empty iterable rejects every name.
            case_mode: Case policy. ``None`` means case-sensitive;
                ``SYSTEM`` is resolved here, once.

        Raises:
            ValueError: On a missing pattern collection or pattern.
            TypeError: On a non-string pattern.
        """
        patterns = _collect_patterns(wildcards)
        resolved = CaseMode.value_of(case_mode).resolve()
        object.__setattr__(self, "_patterns", patterns)
        object.__setattr__(self, "_case_mode", resolved)
        logger.debug("Built %r (case=%s)", self, resolved.value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        # slot state cannot be restored through the blocked __setattr__
        return (_rebuild, (self._patterns, self._case_mode))

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    @property
    def case_mode(self) -> CaseMode:
        return self._case_mode

    def accept(self, name: str) -> bool:
        """Return whether *name* matches any configured pattern."""
        return any(wildcard_match(name, pattern, self._case_mode) for pattern in self._patterns)

    __call__ = accept

    def accept_file(self, file: str | os.PathLike[str] | Any) -> bool:
        """Match the final path component of *file*.

        Args:
            file: Path string, ``os.PathLike`` (``Path``, ``os.DirEntry``) or
                any object with a ``name`` attribute such as an open file.
        """
        return self.accept(_final_component(file))

    def accept_entry(self, parent: Any, name: str) -> bool:
        """Match *name*; *parent* is ignored."""
        return self.accept(name)

    def visit(self, path: str | os.PathLike[str], attributes: os.stat_result | None = None) -> Visit:
        """Walker hook: ``ACCEPT`` on a match, ``REJECT`` otherwise.

        A path without a final component (``/``, ``""``) is matched as the
        empty name. Never asks the walker to skip or stop.
        """
        return Visit.of(self.accept(Path(path).name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({','.join(self._patterns)})"

    __str__ = __repr__
