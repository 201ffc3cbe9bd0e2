"""Public interfaces for asset-hasher."""
