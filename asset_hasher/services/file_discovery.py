"""Expand hashing inputs into concrete file references.

Inputs may be file paths, directories, glob patterns, explicit references,
or any iterable mixing them. Directories are walked depth-first with an
explicit stack of directory iterators; entries are visited in sorted order so
results are reproducible across platforms. Symlinks are skipped, matching
``lstat`` semantics.
"""

import glob
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Union

from loguru import logger

from asset_hasher.core.file_reference import (
    BufferReference,
    FileReference,
    PathReference,
)

HashInput = Union[str, Path, PathReference, BufferReference]


def _normalize_inputs(paths: HashInput | Iterable[HashInput]) -> list[HashInput]:
    if isinstance(paths, (str, Path, PathReference, BufferReference)):
        return [paths]
    return list(paths)


def _sorted_entries(directory: str) -> Iterator[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    return iter(entries)


def walk_directory(directory: str | Path) -> Iterator[PathReference]:
    """Yield every regular file below ``directory`` in depth-first order.

    Sub-directories are descended into as soon as they are reached, so a
    directory's files precede those of any later sibling.

    Args:
        directory: Directory to walk

    Yields:
        PathReference for each regular file
    """
    stack = [_sorted_entries(str(directory))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        if entry.is_dir(follow_symlinks=False):
            stack.append(_sorted_entries(entry.path))
        elif entry.is_file(follow_symlinks=False):
            yield PathReference(Path(entry.path))


def _expand_pattern(pattern: str) -> list[str]:
    # An existing path is taken literally even if it holds glob characters
    if os.path.lexists(pattern):
        return [pattern]
    if glob.escape(pattern) != pattern:
        return sorted(glob.glob(pattern, recursive=True))
    return []


def iter_file_references(paths: HashInput | Iterable[HashInput]) -> Iterator[FileReference]:
    """Expand hashing inputs into file references, preserving input order.

    Args:
        paths: A single input or an iterable of inputs

    Yields:
        FileReference for each concrete file
    """
    for item in _normalize_inputs(paths):
        if isinstance(item, (PathReference, BufferReference)):
            yield item
            continue

        matches = _expand_pattern(str(item))
        if not matches:
            logger.debug(f"No files matched {item}")

        for match in matches:
            if os.path.islink(match):
                continue
            if os.path.isdir(match):
                yield from walk_directory(match)
            elif os.path.isfile(match):
                yield PathReference(Path(match))
