"""Content digest helpers."""

import hashlib

from asset_hasher.core.exceptions import UnsupportedHasherError

# Full digest size in bytes for variable-length (XOF) algorithms
_XOF_DIGEST_SIZES = {"shake_128": 32, "shake_256": 64}


def get_hashers() -> list[str]:
    """List digest algorithms available on this platform.

    Returns:
        Sorted algorithm names accepted by ``generate_hash``
    """
    return sorted(hashlib.algorithms_available)


def is_supported_hasher(algorithm: str) -> bool:
    """Check whether an algorithm name can be used for hashing."""
    return algorithm in hashlib.algorithms_available


def generate_hash(content: bytes | None, algorithm: str, length: int) -> str:
    """Generate a truncated hex digest for file content.

    The digest is always computed in full and then cut to ``length``
    characters, so a shorter length is a prefix of a longer one.

    Args:
        content: Raw file bytes
        algorithm: hashlib algorithm name
        length: Maximum number of hex characters to keep

    Returns:
        Truncated hex digest, or an empty string for empty content

    Raises:
        UnsupportedHasherError: If the algorithm is not available
    """
    if not content:
        return ""

    try:
        hasher = hashlib.new(algorithm)
    except ValueError as e:
        raise UnsupportedHasherError(algorithm) from e

    hasher.update(content)
    if algorithm in _XOF_DIGEST_SIZES:
        digest = hasher.hexdigest(_XOF_DIGEST_SIZES[algorithm])  # type: ignore[call-arg]
    else:
        digest = hasher.hexdigest()
    return digest[:length]
