"""Wildcard matching of names against ``*`` / ``?`` patterns.

``?`` matches exactly one character, ``*`` matches any run of characters
(including an empty run and ``/``). Every other pattern character matches
itself under the active :class:`~wildfilter.case.CaseMode`. Matches are
anchored: the whole name must be consumed by the whole pattern.
"""

from __future__ import annotations

from wildfilter.case import CaseMode, chars_equal

MULTI_WILDCARD = "*"
SINGLE_WILDCARD = "?"


def split_on_tokens(pattern: str) -> list[str]:
    """Split *pattern* into the segments found between ``*`` wildcards.

    Segments keep their ``?`` characters verbatim and may be empty
    (leading, trailing or adjacent ``*``). A pattern without ``*``
    yields a single segment.

    Args:
        pattern: Raw wildcard pattern.

    Returns:
        list[str]: Ordered segments; always at least one element.
    """
    return pattern.split(MULTI_WILDCARD)


def _segment_matches_at(name: str, start: int, segment: str, case_mode: CaseMode) -> bool:
    """Return whether *segment* matches ``name[start:start + len(segment)]``."""
    if start < 0 or start + len(segment) > len(name):
        return False
    for offset, pattern_char in enumerate(segment):
        if pattern_char == SINGLE_WILDCARD:
            continue
        if not chars_equal(name[start + offset], pattern_char, case_mode):
            return False
    return True


def _find_segment(name: str, segment: str, start: int, stop: int, case_mode: CaseMode) -> int:
    """Return the leftmost index in ``[start, stop]`` where *segment* matches, or -1."""
    for index in range(start, stop + 1):
        if _segment_matches_at(name, index, segment, case_mode):
            return index
    return -1


def wildcard_match(name: str, pattern: str, case_mode: CaseMode = CaseMode.SENSITIVE) -> bool:
    """Return whether the whole of *name* matches the whole of *pattern*.

    The first segment is pinned to the start of the name and the last
    segment to its end before any ``*`` is expanded. Middle segments are
    then placed leftmost inside the window left between the two anchors;
    with both ends fixed, an earlier placement only leaves more room for
    the segments that follow, so no backtracking is needed. Runs in
    O(len(name) * len(pattern)).

    Args:
        name: Candidate name. May be empty.
        pattern: Wildcard pattern. May be empty.
        case_mode: Case policy; ``SYSTEM`` is resolved for this call.

    Returns:
        bool: ``True`` on a full match.
    """
    mode = case_mode.resolve()
    segments = split_on_tokens(pattern)

    if len(segments) == 1:
        return len(name) == len(pattern) and _segment_matches_at(name, 0, pattern, mode)

    head, *middle, tail = segments
    if len(head) + len(tail) > len(name):
        return False
    if not _segment_matches_at(name, 0, head, mode):
        return False
    end = len(name) - len(tail)
    if not _segment_matches_at(name, end, tail, mode):
        return False

    cursor = len(head)
    for segment in middle:
        if not segment:
            continue
        found = _find_segment(name, segment, cursor, end - len(segment), mode)
        if found < 0:
            return False
        cursor = found + len(segment)
    return True
