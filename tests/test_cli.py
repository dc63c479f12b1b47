# file: tests/test_cli.py
import pytest

from ircview.cli import build_parser, load_settings, main
from ircview.core.config import Settings
from ircview.services.archive_service import ArchiveService

def test_init_import_and_browse(tmp_path, log_root):
    db_file = tmp_path / "cli" / "archive.sqlite3"

    assert main(["--db-file", str(db_file), "init"]) == 0
    assert db_file.exists()

    assert main(["--db-file", str(db_file), "import", "--src-dir", str(log_root)]) == 0
    archive = ArchiveService(Settings(DB_PATH=str(db_file)))
    assert archive.list_channels() == ["dev", "general"]

    # init wipes the archive
    assert main(["--db-file", str(db_file), "init"]) == 0
    assert archive.list_channels() == []

def test_import_failure_exits_non_zero(tmp_path):
    db_file = tmp_path / "archive.sqlite3"
    assert main(["--db-file", str(db_file), "import", "--src-dir", str(tmp_path / "nope")]) == 1

def test_server_options_override_settings():
    args = build_parser().parse_args(["--db-file", "x.sqlite3", "server", "--port", "9000", "--root", "/irc"])
    settings = load_settings(args)
    assert settings.DB_PATH == "x.sqlite3"
    assert settings.SERVER_PORT == 9000
    assert settings.SERVER_ROOT == "/irc"

def test_import_requires_src_dir():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["import"])

def test_init_failure_exits_non_zero(tmp_path, monkeypatch):
    monkeypatch.setenv("IRCVIEW_SCHEMA_FILE", str(tmp_path / "missing-schema.sql"))
    assert main(["--db-file", str(tmp_path / "archive.sqlite3"), "init"]) == 1
