"""Hashed filename templating.

Templates use three placeholders: ``{name}`` (base name without extension),
``{hash}`` (hash key plus digest) and ``{ext}`` (extension without the dot).
Substitution is literal; no other braces are interpreted.
"""

import glob
import re

from asset_hasher.core.constants import (
    EXT_PLACEHOLDER,
    HASH_PLACEHOLDER,
    NAME_PLACEHOLDER,
)

# Stand-in for the hash segment while building match patterns
_HASH_SENTINEL = "\x00HASH\x00"

_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(p) for p in (NAME_PLACEHOLDER, HASH_PLACEHOLDER, EXT_PLACEHOLDER))
)

# Characters a digest may consist of (hexdigest output)
DIGEST_CHARS = "[0-9a-fA-F]+"


def _prepare(template: str, ext: str) -> str:
    # Extensionless files must not end up with a dangling separator
    if not ext:
        template = template.replace(f".{EXT_PLACEHOLDER}", EXT_PLACEHOLDER)
    return template


def render_filename(template: str, name: str, hash: str, ext: str) -> str:
    """Render a hashed filename.

    Args:
        template: Pattern containing name/hash/ext placeholders
        name: Base name of the source file
        hash: Hash key prefixed digest
        ext: Extension without the leading dot

    Returns:
        Rendered filename
    """
    values = {NAME_PLACEHOLDER: name, HASH_PLACEHOLDER: hash, EXT_PLACEHOLDER: ext}
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(0)], _prepare(template, ext))


def build_artifact_patterns(
    template: str, name: str, ext: str, hash_key: str
) -> tuple[str, re.Pattern[str]]:
    """Build patterns matching any hashed artifact of one source file.

    The glob narrows directory candidates cheaply; the regex is the strict
    check that the hash segment is the hash key followed by digest characters
    only.

    Args:
        template: Hashed filename template
        name: Base name of the source file
        ext: Extension without the leading dot
        hash_key: Marker every generated hash starts with

    Returns:
        Tuple of (glob pattern, compiled regex) relative to the source directory
    """
    rendered = render_filename(template, name, _HASH_SENTINEL, ext)
    parts = rendered.split(_HASH_SENTINEL)

    glob_pattern = (glob.escape(hash_key) + "*").join(
        glob.escape(part) for part in parts
    )
    regex = (re.escape(hash_key) + DIGEST_CHARS).join(re.escape(part) for part in parts)
    return glob_pattern, re.compile(regex)
