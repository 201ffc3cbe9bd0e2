"""Interfaces for pluggable asset-hasher collaborators."""
