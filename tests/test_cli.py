"""Tests for the command-line interface."""

import logging

import pytest

from albums.cli import main
from albums.persistence.schema import SAMPLE_ALBUMS


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "default.yaml"
    path.write_text(f"database:\n  driver: sqlite\n  database: {tmp_path / 'cli.db'}\n")
    return str(path)


class TestInitDb:
    def test_creates_empty_table(self, config_path, capsys):
        assert main(["--config", config_path, "init-db"]) == 0
        assert "0 album(s)" in capsys.readouterr().out

    def test_sample_data(self, config_path, capsys):
        assert main(["--config", config_path, "init-db", "--sample-data"]) == 0
        assert f"{len(SAMPLE_ALBUMS)} album(s)" in capsys.readouterr().out

    def test_rerun_keeps_rows(self, config_path, capsys):
        main(["--config", config_path, "init-db", "--sample-data"])
        assert main(["--config", config_path, "init-db"]) == 0
        assert f"{len(SAMPLE_ALBUMS)} album(s)" in capsys.readouterr().out

    def test_reset(self, config_path, capsys):
        main(["--config", config_path, "init-db", "--sample-data"])
        capsys.readouterr()
        assert main(["--config", config_path, "init-db", "--reset"]) == 0
        assert "0 album(s)" in capsys.readouterr().out

    def test_unreachable_database(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text(
            f"database:\n  driver: sqlite\n  database: {tmp_path / 'missing' / 'dir' / 'x.db'}\n"
        )
        assert main(["--config", str(path), "init-db"]) == 1
        assert "Error initializing database" in capsys.readouterr().out


class TestMain:
    def test_no_command_prints_help(self, config_path, capsys):
        assert main(["--config", config_path]) == 1
        assert "init-db" in capsys.readouterr().out

    def test_log_level_override(self, config_path):
        main(["--config", config_path, "--log-level", "WARNING", "init-db"])
        assert logging.getLogger().level == logging.WARNING
