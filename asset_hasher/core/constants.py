"""Core constants for asset-hasher."""

# Digest defaults
DEFAULT_HASHER = "sha1"
DEFAULT_HASH_LENGTH = 10

# Marker prefixed to every digest so generated artifacts can be told apart
# from hand-authored files sharing the same base name
DEFAULT_HASH_KEY = "aH4urS"

# Hashed filename template placeholders
NAME_PLACEHOLDER = "{name}"
HASH_PLACEHOLDER = "{hash}"
EXT_PLACEHOLDER = "{ext}"
DEFAULT_TEMPLATE = f"{NAME_PLACEHOLDER}-{HASH_PLACEHOLDER}.{EXT_PLACEHOLDER}"

# Manifest defaults
DEFAULT_MANIFEST_NAME = "assets.json"

# Environment variable prefix for configuration overrides
ENV_PREFIX = "ASSET_HASHER_"
