"""Tests for package.json version lookup."""

import json

import pytest

from release_uploader.utils.manifest import read_version


class TestReadVersion:
    """Test read_version function."""

    def test_reads_version_verbatim(self, tmp_path):
        """Test the version string is returned exactly as written."""
        (tmp_path / "package.json").write_text(
            json.dumps({"name": "brave", "version": "0.22.1-beta.3"})
        )

        assert read_version(tmp_path) == "0.22.1-beta.3"

    def test_accepts_string_path(self, tmp_path):
        """Test source_dir may be given as a string."""
        (tmp_path / "package.json").write_text('{"version": "1.2.3"}')

        assert read_version(str(tmp_path)) == "1.2.3"

    def test_missing_manifest(self, tmp_path):
        """Test a missing package.json raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="package.json"):
            read_version(tmp_path)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ValueError."""
        (tmp_path / "package.json").write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON"):
            read_version(tmp_path)

    def test_missing_version_field(self, tmp_path):
        """Test a manifest without version raises ValueError."""
        (tmp_path / "package.json").write_text('{"name": "brave"}')

        with pytest.raises(ValueError, match="No version"):
            read_version(tmp_path)
