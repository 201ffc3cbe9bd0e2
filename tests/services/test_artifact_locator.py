"""Tests for locating previously generated hashed artifacts."""

from pathlib import Path

from asset_hasher.core.constants import DEFAULT_TEMPLATE
from asset_hasher.services.artifact_locator import find_stale_artifacts


class TestFindStaleArtifacts:
    def test_finds_prior_artifacts_of_any_digest(self, tmp_path: Path):
        for name in [
            "logo.png",
            "logo-aH4urS1111.png",
            "logo-aH4urS2222222222.png",
            "logo-other.png",
            "logo-aH4urSzzzz.png",
            "other-aH4urS1111.png",
            "logo-aH4urS3333.jpg",
        ]:
            (tmp_path / name).write_bytes(b"x")

        found = find_stale_artifacts(tmp_path, "logo", "png", DEFAULT_TEMPLATE, "aH4urS")

        assert found == [
            tmp_path / "logo-aH4urS1111.png",
            tmp_path / "logo-aH4urS2222222222.png",
        ]

    def test_never_matches_original(self, tmp_path: Path):
        (tmp_path / "logo.png").write_bytes(b"x")
        assert find_stale_artifacts(tmp_path, "logo", "png", DEFAULT_TEMPLATE, "aH4urS") == []

    def test_missing_directory(self, tmp_path: Path):
        missing = tmp_path / "missing"
        assert find_stale_artifacts(missing, "logo", "png", DEFAULT_TEMPLATE, "aH4urS") == []

    def test_custom_template_and_key(self, tmp_path: Path):
        (tmp_path / "_site_zz0a1b.css").write_text("x")
        (tmp_path / "_site_aH4urS0a1b.css").write_text("x")

        found = find_stale_artifacts(tmp_path, "site", "css", "_{name}_{hash}.{ext}", "zz")

        assert found == [tmp_path / "_site_zz0a1b.css"]

    def test_extensionless_source(self, tmp_path: Path):
        (tmp_path / "LICENSE").write_text("x")
        (tmp_path / "LICENSE-aH4urSabc").write_text("x")

        found = find_stale_artifacts(tmp_path, "LICENSE", "", DEFAULT_TEMPLATE, "aH4urS")

        assert found == [tmp_path / "LICENSE-aH4urSabc"]
