"""Gitignore pruning for the walker, backed by pathspec."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)


def load_gitignore_spec(root: Path) -> GitIgnoreSpec | None:
    """Load the ``.gitignore`` found directly in *root*.

    Args:
        root: Walk root directory.

    Returns:
        A compiled spec when a ``.gitignore`` exists and is readable,
        otherwise ``None``.
    """
    gitignore_path = root / ".gitignore"
    try:
        lines = gitignore_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        logger.debug("Cannot read .gitignore: %s", gitignore_path)
        return None
    return GitIgnoreSpec.from_lines(lines)


def is_ignored(spec: GitIgnoreSpec, relative: PurePosixPath, is_dir: bool) -> bool:
    """Return whether *relative* (to the walk root) is ignored by *spec*.

    Directories are tested with a trailing ``/`` so that directory-only
    rules such as ``build/`` apply to them and not to files.
    """
    candidate = relative.as_posix()
    if is_dir:
        candidate += "/"
    return spec.match_file(candidate)
