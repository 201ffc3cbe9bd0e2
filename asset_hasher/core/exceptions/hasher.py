"""Asset hasher exceptions.

Filesystem failures are not wrapped: read, write and delete
errors surface as the plain ``OSError`` raised by the standard library.
"""


class AssetHasherError(Exception):
    """Base exception for asset hasher errors."""

    pass


class UnsupportedHasherError(AssetHasherError, ValueError):
    """Raised when a digest algorithm is not available on this platform.

    This occurs when:
    - ``hasher`` names an algorithm missing from ``hashlib.algorithms_available``
    - A per-call override requests an unknown algorithm
    """

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(
            f"Unsupported hasher '{algorithm}'. "
            "Use get_hashers() to list available algorithms."
        )


class ConfigurationError(AssetHasherError, ValueError):
    """Raised when a configuration file cannot be used.

    This occurs when:
    - The config file is not valid JSON
    - The config file does not contain a JSON object
    """

    pass
