"""Reference directory walker using os.scandir with an explicit stack (DFS).

The walker owns all file-system access. For each entry it asks an
:class:`EntryFilter` for a :class:`Visit` signal and acts on it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Protocol

from wildfilter.gitignore import is_ignored, load_gitignore_spec

logger = logging.getLogger(__name__)


class Visit(Enum):
    """Traversal-control signal returned by an entry filter."""

    ACCEPT = "accept"  # continue, entry selected
    REJECT = "reject"  # continue, entry not selected
    SKIP_SUBTREE = "skip_subtree"  # not selected, do not descend
    TERMINATE = "terminate"  # stop the walk

    @classmethod
    def of(cls, accepted: bool) -> Visit:
        return cls.ACCEPT if accepted else cls.REJECT


@dataclass(frozen=True, slots=True)
class Entry:
    """A selected filesystem entry.

    Attributes:
        path: Absolute path of the filesystem entry.
        name: Basename of the entry.
        is_dir: Whether the entry is a directory.
        depth: Parent directory depth from the walk root.
        parent_path: Absolute parent directory path.
    """

    path: Path
    name: str
    is_dir: bool
    depth: int
    parent_path: Path


@dataclass(frozen=True, slots=True)
class WalkOptions:
    """Options controlling walker behavior.

    Attributes:
        max_depth: Maximum parent depth to walk. ``None`` means unlimited.
        all_files: Whether to include hidden entries.
        gitignore: Whether to prune entries matched by ``root/.gitignore``.
    """

    max_depth: int | None = None
    all_files: bool = False
    gitignore: bool = False


class EntryFilter(Protocol):
    """Protocol for entry selection.

    Keeps walker logic decoupled from matching strategy.
    """

    def visit(self, path: Path, attributes: os.stat_result | None) -> Visit: ...


class _AcceptAll:
    """Default filter that selects everything."""

    def visit(self, path: Path, attributes: os.stat_result | None) -> Visit:
        return Visit.ACCEPT


def walk(
    root: Path,
    options: WalkOptions | None = None,
    entry_filter: EntryFilter | None = None,
) -> list[Entry]:
    """Walk *root* and return selected entries in deterministic DFS order.

    Args:
        root: Root directory to walk.
        options: Walker options. Defaults to ``WalkOptions()``.
        entry_filter: Selection filter. Defaults to accepting everything.

    Returns:
        list[Entry]: Entries for which the filter answered ``ACCEPT``.
    """
    walk_options = options or WalkOptions()
    active_filter = entry_filter or _AcceptAll()
    root = root.resolve()

    if not root.is_dir():
        return []

    spec = load_gitignore_spec(root) if walk_options.gitignore else None
    result: list[Entry] = []

    # Stack items: (directory_path, depth)
    stack: list[tuple[Path, int]] = [(root, 0)]

    while stack:
        current_dir, depth = stack.pop()

        if walk_options.max_depth is not None and depth > walk_options.max_depth:
            continue

        try:
            with os.scandir(current_dir) as it:
                raw_entries = list(it)
        except PermissionError:
            logger.debug("Permission denied: %s", current_dir)
            continue

        raw_entries.sort(key=lambda e: e.name)
        child_dirs: list[tuple[Path, int]] = []

        for dir_entry in raw_entries:
            name = dir_entry.name
            try:
                is_dir = dir_entry.is_dir(follow_symlinks=False)
                attributes = dir_entry.stat(follow_symlinks=False)
            except OSError:
                logger.debug("Cannot stat: %s", dir_entry.path)
                continue

            if not walk_options.all_files and name.startswith("."):
                continue

            path = Path(dir_entry.path)
            if spec is not None and is_ignored(
                spec, PurePosixPath(path.relative_to(root).as_posix()), is_dir
            ):
                logger.debug("Ignored by .gitignore: %s", path)
                continue

            decision = active_filter.visit(path, attributes)
            if decision is Visit.TERMINATE:
                logger.debug("Walk terminated at %s", path)
                return result
            if decision is Visit.SKIP_SUBTREE:
                continue

            if decision is Visit.ACCEPT:
                result.append(
                    Entry(
                        path=path,
                        name=name,
                        is_dir=is_dir,
                        depth=depth,
                        parent_path=current_dir,
                    )
                )

            if is_dir:
                child_dirs.append((path, depth + 1))

        # Push children in reverse so first-alphabetical is popped first
        for child in reversed(child_dirs):
            stack.append(child)

    return result
