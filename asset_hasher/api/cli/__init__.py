"""Command line interface for asset-hasher."""
