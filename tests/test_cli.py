"""Tests for the termblog command line."""

from unittest.mock import MagicMock, patch

import pytest

from termblog.cli import main
from termblog.script.bundle import build_bundle


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TERMBLOG_HOST",
        "TERMBLOG_PORT",
        "TERMBLOG_PUBLIC_DIR",
        "TERMBLOG_DEBUG",
        "TERMBLOG_INJECT_SCRIPT",
        "TERMBLOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestNoCommand:
    def test_prints_help(self, capsys) -> None:
        with pytest.raises(SystemExit) as info:
            main([])
        assert info.value.code == 0
        assert "serve" in capsys.readouterr().out


class TestServe:
    @patch("termblog.server.production.run_production_server")
    def test_defaults(self, mock_server: MagicMock, public_dir) -> None:
        main(["serve", str(public_dir)])
        mock_server.assert_called_once()
        app = mock_server.call_args[0][0]
        assert app.config.public_path == public_dir.resolve()
        assert mock_server.call_args[1]["host"] == "127.0.0.1"
        assert mock_server.call_args[1]["port"] == 4001

    @patch("termblog.server.production.run_production_server")
    def test_host_and_port_flags(self, mock_server: MagicMock, public_dir) -> None:
        main(["serve", str(public_dir), "--host", "0.0.0.0", "--port", "3000"])
        kwargs = mock_server.call_args[1]
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 3000

    @patch("termblog.server.production.run_production_server")
    def test_environment(
        self, mock_server: MagicMock, public_dir, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TERMBLOG_PUBLIC_DIR", str(public_dir))
        monkeypatch.setenv("TERMBLOG_PORT", "8080")
        main(["serve"])
        assert mock_server.call_args[1]["port"] == 8080

    @patch("termblog.server.production.run_production_server")
    def test_flag_beats_environment(
        self, mock_server: MagicMock, public_dir, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TERMBLOG_PORT", "8080")
        main(["serve", str(public_dir), "--port", "9000"])
        assert mock_server.call_args[1]["port"] == 9000

    @patch("termblog.server.dev.run_dev_server")
    def test_debug_uses_dev_server(self, mock_server: MagicMock, public_dir) -> None:
        main(["serve", str(public_dir), "--debug"])
        args, kwargs = mock_server.call_args
        assert args[1:] == ("127.0.0.1", 4001)
        assert kwargs["reload"] is True
        assert kwargs["reload_dirs"] == (str(public_dir.resolve()),)

    @patch("termblog.server.production.run_production_server")
    def test_inject_and_not_found(self, mock_server: MagicMock, public_dir) -> None:
        main(["serve", str(public_dir), "--inject-script", "--not-found", "404.html"])
        config = mock_server.call_args[0][0].config
        assert config.inject_script is True
        assert config.not_found_page == "404.html"

    def test_missing_directory_exits(self, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit) as info:
            main(["serve", str(tmp_path / "nope")])
        assert info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: Public directory does not exist")

    def test_port_flag_out_of_range_exits(self, public_dir, capsys) -> None:
        with pytest.raises(SystemExit) as info:
            main(["serve", str(public_dir), "--port", "70000"])
        assert info.value.code == 1
        assert "Port out of range: 70000" in capsys.readouterr().err

    def test_bad_port_environment_exits(self, public_dir, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TERMBLOG_PORT", "http")
        with pytest.raises(SystemExit) as info:
            main(["serve", str(public_dir)])
        assert info.value.code == 1
        assert "TERMBLOG_PORT" in capsys.readouterr().err


class TestBuildScript:
    def test_writes_to_output(self, tmp_path, capsys) -> None:
        target = tmp_path / "dist" / "script.js"
        main(["build-script", "--output", str(target)])
        assert target.read_text(encoding="utf-8") == build_bundle()
        assert capsys.readouterr().out.strip() == str(target.resolve())

    def test_default_target_in_public_dir(self, public_dir, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TERMBLOG_PUBLIC_DIR", str(public_dir))
        main(["build-script"])
        assert (public_dir / "script.js").read_text(encoding="utf-8") == build_bundle()

    def test_unwritable_target_exits(self, tmp_path, capsys) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(SystemExit) as info:
            main(["build-script", "-o", str(blocker / "script.js")])
        assert info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: cannot write")
