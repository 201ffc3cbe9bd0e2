import os
from pathlib import Path

import pytest

from asset_hasher.services.hashing_service import AssetHasher


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure tests run with a clean environment.

    Unset ASSET_HASHER_* variables that can alter configuration and disable
    Rich so CLI output is plain text.
    """
    for k in [k for k in os.environ.keys() if k.startswith("ASSET_HASHER_")]:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("ASSET_HASHER_NO_RICH", "1")
    yield


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    """Directory with a few source assets."""
    (tmp_path / "logo.png").write_bytes(b"v1")
    (tmp_path / "styles.css").write_text("body { color: red; }")
    (tmp_path / "main.js").write_text("console.log('test file');")
    return tmp_path


@pytest.fixture
def hasher(asset_dir: Path) -> AssetHasher:
    """AssetHasher rooted at ``asset_dir`` with the manifest written there."""
    return AssetHasher({"base": str(asset_dir), "path": str(asset_dir)})
