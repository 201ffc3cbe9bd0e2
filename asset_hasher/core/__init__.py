"""Core models, configuration and utilities for asset-hasher."""
