"""
Tests for the hostredirect CLI and its configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hostredirect.app_shell.cli import main
from hostredirect.app_shell.config import InvalidLogLevelError, resolve_log_level
from hostredirect.app_shell.exit_codes import ExitCode

VALID = 'mapping:\n  a.test:\n    "/docs": https://docs.test\n    "/": https://www.test\n'


class FakeEnvironment:
    """Dict-backed environment for testing."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = values or {}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)


@pytest.fixture
def mapping_file(tmp_path: Path) -> Path:
    path = tmp_path / "mapping.yaml"
    path.write_text(VALID)
    return path


class TestResolveLogLevel:
    """Test log level resolution."""

    def test_default_is_info(self) -> None:
        assert resolve_log_level(None, FakeEnvironment()) == logging.INFO

    def test_explicit_level(self) -> None:
        assert resolve_log_level("debug", FakeEnvironment()) == logging.DEBUG

    def test_env_level(self) -> None:
        env = FakeEnvironment({"LOG_LEVEL": "warning"})
        assert resolve_log_level(None, env) == logging.WARNING

    def test_explicit_beats_env(self) -> None:
        env = FakeEnvironment({"LOG_LEVEL": "warning"})
        assert resolve_log_level("ERROR", env) == logging.ERROR

    def test_warn_alias(self) -> None:
        assert resolve_log_level("warn", FakeEnvironment()) == logging.WARNING

    def test_invalid_level(self) -> None:
        with pytest.raises(InvalidLogLevelError, match="VERBOSE"):
            resolve_log_level("verbose", FakeEnvironment())


class TestCheckCommand:
    """Test `hostredirect check`."""

    def test_valid_file(self, mapping_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--mapping-file", str(mapping_file), "check"])

        assert code == ExitCode.OK
        assert "1 host(s): a.test" in capsys.readouterr().out

    def test_file_from_env(
        self,
        mapping_file: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("MAPPING_FILE", str(mapping_file))
        assert main(["check"]) == ExitCode.OK

    def test_missing_file(self, tmp_path: Path) -> None:
        code = main(["--mapping-file", str(tmp_path / "absent.yaml"), "check"])
        assert code == ExitCode.CONFIG_ERROR

    def test_invalid_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "mapping.yaml"
        path.write_text('mapping:\n  localhost:\n    "/": https://x\n')

        code = main(["--mapping-file", str(path), "check"])

        assert code == ExitCode.BAD_MAPPING_FILE
        assert "reserved_host_name" in caplog.text

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mapping.yaml"
        path.write_text("---\n")

        assert main(["--mapping-file", str(path), "check"]) == ExitCode.BAD_MAPPING_FILE

    def test_warn_log_level_accepted(self, mapping_file: Path) -> None:
        code = main(["--log-level", "warn", "--mapping-file", str(mapping_file), "check"])
        assert code == ExitCode.OK

    def test_invalid_log_level(
        self, mapping_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["--log-level", "chatty", "--mapping-file", str(mapping_file), "check"])

        assert code == ExitCode.INVALID_LOGLEVEL
        assert "Invalid log level" in capsys.readouterr().err


class TestLookupCommand:
    """Test `hostredirect lookup`."""

    def test_exact_match(self, mapping_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--mapping-file", str(mapping_file), "lookup", "a.test", "/docs"])

        assert code == ExitCode.OK
        assert capsys.readouterr().out.strip() == "https://docs.test"

    def test_root_fallback(self, mapping_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--mapping-file", str(mapping_file), "lookup", "a.test", "/elsewhere"])
        assert capsys.readouterr().out.strip() == "https://www.test"

    def test_no_redirect(self, mapping_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--mapping-file", str(mapping_file), "lookup", "b.test", "/docs"])

        assert code == ExitCode.OK
        assert capsys.readouterr().out == ""

    def test_bad_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mapping.yaml"
        path.write_text("mapping: [unclosed")

        code = main(["--mapping-file", str(path), "lookup", "a.test", "/"])

        assert code == ExitCode.BAD_MAPPING_FILE

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
