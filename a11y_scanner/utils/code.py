"""Source file discovery."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Generator, Iterable, Sequence

GLOB_CHARS = set("*?[")


def _matches(relative: str, pattern: str) -> bool:
    if fnmatch(relative, pattern):
        return True
    # "**/" also matches files at the top of the tree
    return pattern.startswith("**/") and fnmatch(relative, pattern[3:])


def _excluded(relative: str, patterns: Sequence[str]) -> bool:
    parts = relative.split("/")
    for pattern in patterns:
        if GLOB_CHARS.isdisjoint(pattern):
            if pattern in parts:
                return True
        elif _matches(relative, pattern):
            return True
    return False


def iter_source_files(
    root_paths: Iterable[str],
    include: Sequence[str] = ("**/*.html",),
    exclude: Sequence[str] = (),
) -> Generator[Path, None, None]:
    """Yield markup files beneath the provided paths.

    Explicit file paths are yielded as-is; directories are walked and
    filtered through the ``include`` and ``exclude`` globs, which apply to
    the path relative to the directory. A bare name in ``exclude`` (such as
    ``node_modules``) drops any path containing that segment.
    """

    for root in root_paths:
        root_path = Path(root)
        if root_path.is_file():
            yield root_path
            continue
        for path in sorted(root_path.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(root_path).as_posix()
            if _excluded(relative, exclude):
                continue
            if any(_matches(relative, pattern) for pattern in include):
                yield path
