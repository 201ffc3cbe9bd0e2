"""Tests for hashed filename templating."""

from asset_hasher.core.constants import DEFAULT_TEMPLATE
from asset_hasher.core.utils.template import build_artifact_patterns, render_filename


class TestRenderFilename:
    """Test placeholder substitution."""

    def test_default_template(self):
        assert render_filename(DEFAULT_TEMPLATE, "logo", "aH4urSabc123", "png") == (
            "logo-aH4urSabc123.png"
        )

    def test_custom_template(self):
        assert render_filename("_{name}_{hash}.{ext}", "style", "aH4urS0f", "css") == (
            "_style_aH4urS0f.css"
        )

    def test_extensionless_file_has_no_trailing_dot(self):
        assert render_filename(DEFAULT_TEMPLATE, "Makefile", "aH4urS0f", "") == (
            "Makefile-aH4urS0f"
        )

    def test_substitution_is_literal(self):
        """Values containing placeholder text are not substituted again."""
        assert render_filename(DEFAULT_TEMPLATE, "odd{hash}", "aH4urS0f", "txt") == (
            "odd{hash}-aH4urS0f.txt"
        )

    def test_multi_dot_name(self):
        assert render_filename(DEFAULT_TEMPLATE, "app.min", "aH4urS0f", "js") == (
            "app.min-aH4urS0f.js"
        )


class TestBuildArtifactPatterns:
    """Test glob and regex built for the stale-artifact locator."""

    def test_glob_uses_hash_key_wildcard(self):
        glob_pattern, _ = build_artifact_patterns(DEFAULT_TEMPLATE, "logo", "png", "aH4urS")
        assert glob_pattern == "logo-aH4urS*.png"

    def test_regex_accepts_any_digest(self):
        _, regex = build_artifact_patterns(DEFAULT_TEMPLATE, "logo", "png", "aH4urS")
        assert regex.fullmatch("logo-aH4urS0123abcd.png")
        assert regex.fullmatch("logo-aH4urS0123456789abcdef0123.png")

    def test_regex_rejects_non_artifacts(self):
        _, regex = build_artifact_patterns(DEFAULT_TEMPLATE, "logo", "png", "aH4urS")
        assert not regex.fullmatch("logo.png")
        assert not regex.fullmatch("logo-other.png")
        assert not regex.fullmatch("logo-aH4urS.png")
        assert not regex.fullmatch("logo-aH4urSnot-hex.png")
        assert not regex.fullmatch("logo-dark-aH4urS0123.png")

    def test_glob_metacharacters_in_name_are_escaped(self):
        glob_pattern, regex = build_artifact_patterns(
            DEFAULT_TEMPLATE, "icon[1]", "svg", "aH4urS"
        )
        assert glob_pattern == "icon[[]1]-aH4urS*.svg"
        assert regex.fullmatch("icon[1]-aH4urSbeef.svg")
