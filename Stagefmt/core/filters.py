from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple

import pathspec

from Stagefmt.core.config import DEFAULT_EXCLUDED_DIRS

logger = logging.getLogger(__name__)

_SEGMENT_SPLIT_RE = re.compile(r"[\\/]")


def as_path_list(paths: Iterable[str]) -> List[str]:
    """
    Materialize 'paths' as a list, rejecting anything that is not a string.

    A bare string is refused as well: iterating it would yield characters.
    """
    if isinstance(paths, (str, bytes)):
        raise TypeError(
            f"Expected a sequence of paths, got {type(paths).__name__}"
        )
    out = list(paths)
    for i, path in enumerate(out):
        if not isinstance(path, str):
            raise TypeError(
                f"Path at index {i} must be str, got {type(path).__name__}"
            )
    return out


def path_segments(path: str) -> List[str]:
    """Split a relative path on either separator, dropping '' and '.'."""
    return [seg for seg in _SEGMENT_SPLIT_RE.split(path) if seg and seg != "."]


def is_excluded_path(
    path: str,
    excluded_dirs: Sequence[str] = DEFAULT_EXCLUDED_DIRS,
) -> bool:
    """
    Decide whether 'path' lives inside an excluded directory.

    A path is excluded when any of its segments equals one of
    'excluded_dirs', so '.vscode', '.vscode/settings.json' and
    'pkg/.vscode/x.json' are all excluded. Only whole segments count:
    'my.vscode/file.ts' and '.vscodex/a.ts' are kept.
    """
    if not isinstance(path, str):
        raise TypeError(f"Path must be str, got {type(path).__name__}")
    excluded = set(excluded_dirs)
    return any(seg in excluded for seg in path_segments(path))


def partition_paths(
    paths: Iterable[str],
    excluded_dirs: Sequence[str] = DEFAULT_EXCLUDED_DIRS,
) -> Tuple[List[str], List[str]]:
    """
    Split 'paths' into (kept, excluded), both in input order.

    Raises:
        TypeError: if 'paths' is a bare string or holds a non-string
    """
    kept: List[str] = []
    excluded: List[str] = []
    for path in as_path_list(paths):
        if is_excluded_path(path, excluded_dirs):
            logger.debug("Excluding %s", path)
            excluded.append(path)
            continue
        kept.append(path)
    return kept, excluded


def filter_paths(
    paths: Iterable[str],
    excluded_dirs: Sequence[str] = DEFAULT_EXCLUDED_DIRS,
) -> List[str]:
    """Return the paths outside every excluded directory, in input order."""
    return partition_paths(paths, excluded_dirs)[0]


def _find_brace_group(pattern: str) -> tuple[int, int] | None:
    start = pattern.find("{")
    while start != -1:
        depth = 0
        for end in range(start, len(pattern)):
            ch = pattern[end]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return start, end
        # unbalanced: try a later opening brace
        start = pattern.find("{", start + 1)
    return None


def _split_top_level(body: str) -> List[str]:
    parts: List[str] = []
    depth = 0
    current = []
    for ch in body:
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current.append(ch)
    parts.append("".join(current))
    return parts


def expand_braces(pattern: str) -> List[str]:
    """
    Expand shell-style brace groups.

    Example:
        >>> expand_braces("**/*.{js,ts}")
        ['**/*.js', '**/*.ts']

    Groups without a comma, and unbalanced braces, are left as literals.
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]
    start, end = group
    head, body, tail = pattern[:start], pattern[start + 1:end], pattern[end + 1:]
    alternatives = _split_top_level(body)
    if len(alternatives) < 2:
        return [head + "{" + alt + "}" + rest
                for alt in expand_braces(body)
                for rest in expand_braces(tail)]

    out: List[str] = []
    for alt in alternatives:
        out.extend(expand_braces(head + alt + tail))
    return out


@lru_cache(maxsize=32)
def _compile_pattern(pattern: str) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitwildmatch", expand_braces(pattern))


def matches_pattern(path: str, pattern: str) -> bool:
    """
    Glob matching of a relative path, lint-staged style.

    Semantics:
      - Brace groups expand into alternatives.
      - Each alternative follows gitwildmatch rules: a pattern without '/'
        matches the basename at any depth, '*' never crosses '/', and
        '**/' also matches zero directories ('src/**/*.ts' matches
        'src/a.ts').
    """
    rel = "/".join(path_segments(path))
    return _compile_pattern(pattern).match_file(rel)


def select_paths(paths: Iterable[str], pattern: str) -> List[str]:
    """Return the paths matching 'pattern', in input order."""
    return [p for p in as_path_list(paths) if matches_pattern(p, pattern)]


__all__ = [
    "as_path_list",
    "expand_braces",
    "filter_paths",
    "is_excluded_path",
    "matches_pattern",
    "partition_paths",
    "path_segments",
    "select_paths",
]
