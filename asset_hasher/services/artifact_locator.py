"""Locate previously generated hashed artifacts for a source file."""

from pathlib import Path

from loguru import logger

from asset_hasher.core.utils.template import build_artifact_patterns


def find_stale_artifacts(
    directory: Path, name: str, ext: str, template: str, hash_key: str
) -> list[Path]:
    """Find hashed artifacts previously generated for one source file.

    Renders the template with the hash segment replaced by ``hash_key`` plus a
    wildcard, globs the directory, then keeps only matches whose hash segment
    is the hash key followed by digest characters. The unhashed original never
    contains the hash key, so it is never returned.

    Args:
        directory: Directory holding the source file
        name: Source base name without extension
        ext: Source extension without the leading dot
        template: Hashed filename template
        hash_key: Marker every generated hash starts with

    Returns:
        Sorted list of matching artifact paths (may be empty)
    """
    if not directory.is_dir():
        return []

    glob_pattern, regex = build_artifact_patterns(template, name, ext, hash_key)

    matches: list[Path] = []
    for candidate in directory.glob(glob_pattern):
        relative = candidate.relative_to(directory).as_posix()
        if regex.fullmatch(relative) and not candidate.is_dir():
            matches.append(candidate)

    if matches:
        logger.debug(
            f"Found {len(matches)} hashed artifact(s) for {name}.{ext} in {directory}"
        )
    return sorted(matches)
