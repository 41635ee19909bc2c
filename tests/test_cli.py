"""Tests for the uploader CLI."""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from release_uploader.cli import main, parse_args

# Project paths
project_root = Path(__file__).parent.parent
scripts_dir = project_root / "scripts"
upload_script = scripts_dir / "upload.py"


def _script_env(**overrides):
    env = {k: v for k, v in os.environ.items() if not k.startswith("S3_")}
    env.pop("LOG_FORMAT", None)
    env.update(overrides)
    return env


@pytest.fixture
def source_dir(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"version": "1.2.3"}))
    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "Brave.dmg").write_bytes(b"dmg")
    return tmp_path


@pytest.fixture
def s3_env(monkeypatch):
    monkeypatch.setenv("S3_KEY", "test-key")
    monkeypatch.setenv("S3_SECRET", "test-secret")
    monkeypatch.delenv("S3_BUCKET", raising=False)
    return monkeypatch


class TestUploadScript:
    """Tests for scripts/upload.py run as a subprocess."""

    def test_help_message(self):
        """Test that --help works."""
        result = subprocess.run(
            [sys.executable, str(upload_script), "--help"],
            capture_output=True,
            text=True,
            env=_script_env(),
        )
        assert result.returncode == 0
        assert "Upload release artifacts to S3" in result.stdout
        assert "--channel" in result.stdout
        assert "--source" in result.stdout
        assert "--send" in result.stdout

    def test_missing_required_channel(self):
        """Test that missing --channel returns a usage error."""
        result = subprocess.run(
            [sys.executable, str(upload_script)],
            capture_output=True,
            text=True,
            env=_script_env(),
        )
        assert result.returncode == 2
        assert "required" in result.stderr.lower()

    def test_invalid_channel(self, tmp_path):
        """Test an unknown channel fails before the source dir is checked."""
        result = subprocess.run(
            [
                sys.executable,
                str(upload_script),
                "--channel",
                "nightly-typo",
                "--source",
                str(tmp_path / "does-not-exist"),
            ],
            capture_output=True,
            text=True,
            env=_script_env(),
        )
        assert result.returncode == 1
        assert "Invalid channel nightly-typo" in result.stdout
        assert "does not exist" not in result.stdout

    def test_report_mode(self, source_dir):
        """Test a dry run reports present and missing artifacts."""
        result = subprocess.run(
            [
                sys.executable,
                str(upload_script),
                "--channel",
                "release",
                "--source",
                str(source_dir),
            ],
            capture_output=True,
            text=True,
            env=_script_env(S3_KEY="fake", S3_SECRET="fake"),
        )
        output = result.stdout + result.stderr
        assert result.returncode == 0
        assert "exists -> multi-channel/releases/release/1.2.3/osx" in output
        assert "IGNORING" in output
        assert "* Process complete" in output

    def test_script_has_shebang(self):
        """Verify the script has proper shebang."""
        with open(upload_script, "r") as f:
            first_line = f.readline().strip()
        assert first_line == "#!/usr/bin/env python3"


class TestMain:
    """In-process tests for cli.main."""

    def test_parse_args_defaults(self):
        args = parse_args(["--channel", "dev"])

        assert args.channel == "dev"
        assert args.source == "../browser-laptop"
        assert args.send is False
        assert args.verbose is False

    def test_missing_source_dir(self, tmp_path, s3_env, capsys):
        code = main(["--channel", "beta", "--source", str(tmp_path / "nope")])

        assert code == 1
        assert "does not exist" in capsys.readouterr().out

    def test_missing_credentials(self, source_dir, monkeypatch, capsys):
        monkeypatch.delenv("S3_KEY", raising=False)
        monkeypatch.delenv("S3_SECRET", raising=False)

        code = main(["--channel", "beta", "--source", str(source_dir)])

        assert code == 1
        assert "S3_KEY or S3_SECRET" in capsys.readouterr().out

    @patch("release_uploader.uploader.dispatch.create_s3_client")
    def test_send_uploads_present_artifacts(self, mock_create, source_dir, s3_env):
        client = mock_create.return_value

        code = main(["--channel", "release", "--source", str(source_dir), "--send"])

        assert code == 0
        client.upload_fileobj.assert_called_once()
        _, bucket, key = client.upload_fileobj.call_args.args
        assert bucket == "brave-download"
        assert key == "multi-channel/releases/release/1.2.3/osx/Brave.dmg"

    @patch("release_uploader.uploader.dispatch.create_s3_client")
    def test_send_failure_exits_nonzero(self, mock_create, source_dir, s3_env, capsys):
        mock_create.return_value.upload_fileobj.side_effect = PermissionError("Access Denied")

        code = main(["--channel", "release", "--source", str(source_dir), "--send"])

        assert code == 1
        assert "Access Denied" in capsys.readouterr().out

    def test_failed_upload_logs_one_traceback(self, source_dir, s3_env, caplog, capsys):
        """Test an upload failure is reported with a single traceback."""
        caplog.set_level(logging.INFO)

        with patch("release_uploader.uploader.dispatch.create_s3_client") as mock_create:
            mock_create.return_value.upload_fileobj.side_effect = ConnectionError("reset")
            code = main(["--channel", "release", "--source", str(source_dir), "--send"])

        assert code == 1
        assert len([r for r in caplog.records if r.exc_info]) == 1
        assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 1
        assert "❌ Upload failed: reset" in capsys.readouterr().out

    def test_unreadable_manifest_reports_startup_error(self, source_dir, s3_env, capsys):
        """Test OS errors while reading package.json exit cleanly with status 1."""
        with patch(
            "release_uploader.release.read_version",
            side_effect=PermissionError("Permission denied: 'package.json'"),
        ):
            code = main(["--channel", "beta", "--source", str(source_dir)])

        assert code == 1
        assert "❌ Permission denied: 'package.json'" in capsys.readouterr().out

    def test_repeated_runs_read_current_environment(self, source_dir, s3_env):
        """Test each run picks up the credentials and bucket set at that time."""
        seen = []

        def record_client(config):
            seen.append((config.bucket, config.access_key_id))
            return MagicMock()

        with patch(
            "release_uploader.uploader.dispatch.create_s3_client",
            side_effect=record_client,
        ):
            s3_env.setenv("S3_BUCKET", "bucket-one")
            s3_env.setenv("S3_KEY", "k1")
            assert main(["--channel", "release", "--source", str(source_dir), "--send"]) == 0

            s3_env.setenv("S3_BUCKET", "bucket-two")
            s3_env.setenv("S3_KEY", "k2")
            assert main(["--channel", "release", "--source", str(source_dir), "--send"]) == 0

        assert seen == [("bucket-one", "k1"), ("bucket-two", "k2")]
