# file: tests/conftest.py
import pathlib
import pytest
from fastapi.testclient import TestClient

from ircview.core.config import Settings
from ircview.db.archive import initialize_archive
from ircview.main import create_app

def write_log(root: pathlib.Path, channel: str, log_date: str, lines, suffix: str = ".txt") -> pathlib.Path:
    channel_dir = root / channel
    channel_dir.mkdir(parents=True, exist_ok=True)
    path = channel_dir / f"{log_date}{suffix}"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path

@pytest.fixture
def settings(tmp_path) -> Settings:
    app_settings = Settings(DB_PATH=str(tmp_path / "db" / "archive.sqlite3"))
    initialize_archive(app_settings)
    return app_settings

@pytest.fixture
def log_root(tmp_path) -> pathlib.Path:
    """
    dev/2023-01-01.txt      2 messages
    dev/2023-01-03.txt      system lines only (no record)
    dev/notes.md            not a log file
    general/2023-01-01.txt  2 messages + 1 join line
    general/2023-01-02.txt  1 message + 1 Japanese notice
    """
    root = tmp_path / "logs"
    write_log(root, "dev", "2023-01-01", [
        "09:00:00 <#dev@ircnet:dave> deploy finished",
        "09:05:00 <#dev@ircnet:erin> cats are great too",
    ])
    write_log(root, "dev", "2023-01-03", [
        "10:00:00 + dave (dave@example.com) to #dev@ircnet",
        "10:01:00 ! erin (Quit: bye)",
    ])
    write_log(root, "dev", "notes", ["12:00:00 <#dev@ircnet:dave> not imported"], suffix=".md")
    write_log(root, "general", "2023-01-01", [
        "12:00:00 <#general@ircnet:alice> I love cats",
        "12:01:00 + bob (bob@example.com) to #general@ircnet",
        "12:02:00 <#general@ircnet:bob> hello world",
    ])
    write_log(root, "general", "2023-01-02", [
        "08:00:00 <#general@ircnet:alice> I love dogs",
        "08:30:00 (#general@ircnet:carol) 今日は障害が発生しました",
    ])
    return root

@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
