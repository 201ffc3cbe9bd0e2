"""Configuration models for asset-hasher."""
