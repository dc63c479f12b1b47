# file: tests/test_search_service.py
import pytest

from conftest import write_log
from ircview.core.config import Settings
from ircview.db.archive import get_db_connection, initialize_archive
from ircview.schemas.models import LogRecord
from ircview.services.import_service import ImportService
from ircview.services.search_service import (
    SearchService,
    candidate_lookup,
    first_word,
    prefix,
    refine_lines,
)
from ircview.services.tokenizer import build_match_expression

@pytest.fixture
def imported(settings, log_root):
    ImportService(settings).run(log_root)
    return settings

def test_record_is_found_by_each_bigram_and_by_whole_word(settings, tmp_path):
    root = tmp_path / "hello"
    write_log(root, "general", "2023-01-01", ["12:00 <alice> hello"])
    ImportService(settings).run(root)
    service = SearchService(settings)

    for query in ["he", "el", "ll", "lo", "hello"]:
        response = service.search(query)
        assert [r.log_date for r in response.records] == ["2023-01-01"], query

def test_search_precision(imported):
    response = SearchService(imported).search("cats")

    found = {(r.channel, r.log_date) for r in response.records}
    assert found == {("general", "2023-01-01"), ("dev", "2023-01-01")}
    general = next(r for r in response.records if r.channel == "general")
    assert general.content == "12:00:00 <#general@ircnet:alice> I love cats"
    assert response.channels == ["dev", "general"]
    assert response.low_precision is False

def test_channel_filter(imported):
    response = SearchService(imported).search("cats", channel="general")
    assert [(r.channel, r.log_date) for r in response.records] == [("general", "2023-01-01")]
    assert response.channel == "general"
    assert response.channels == ["general"]

def test_empty_channel_means_no_filter(imported):
    response = SearchService(imported).search("cats", channel="")
    assert response.channel is None
    assert len(response.records) == 2

def test_japanese_substring_search(imported):
    response = SearchService(imported).search("障害")
    assert [(r.channel, r.log_date) for r in response.records] == [("general", "2023-01-02")]
    assert response.records[0].content == "08:30:00 (#general@ircnet:carol) 今日は障害が発生しました"

def test_no_hits_is_an_empty_result(imported):
    response = SearchService(imported).search("zebra")
    assert response.records == []
    assert response.channels == []

def test_query_without_searchable_tokens_skips_the_store(tmp_path):
    # The database file does not even exist; no query must be issued
    service = SearchService(Settings(DB_PATH=str(tmp_path / "missing" / "db.sqlite3")))
    response = service.search('"')
    assert response.records == []
    assert response.low_precision is True

def test_low_precision_flag(imported):
    service = SearchService(imported)
    assert service.search("c").low_precision is True
    assert service.search("ca").low_precision is True
    assert service.search("cat").low_precision is False

def test_single_character_query_still_runs(imported):
    # "I love cats" has "i " in it, which the padded query "i" turns into
    response = SearchService(imported).search("i")
    assert response.low_precision is True
    assert {r.log_date for r in response.records} == {"2023-01-01", "2023-01-02"}

def test_snippet_is_bounded(settings, tmp_path):
    root = tmp_path / "busy"
    write_log(root, "general", "2023-01-01", [f"12:{i:02d} <alice> cats #{i}" for i in range(50)])
    ImportService(settings).run(root)

    response = SearchService(settings).search("cats")

    lines = response.records[0].content.split("\n")
    assert len(lines) == 11
    assert lines[0] == "12:00 <alice> cats #0"
    assert lines[-1] == "12:10 <alice> cats #10"

def test_multi_word_query_refines_on_first_word_only(imported):
    response = SearchService(imported).search("hello cats")
    assert [(r.channel, r.log_date) for r in response.records] == [("general", "2023-01-01")]
    assert response.records[0].content == "12:02:00 <#general@ircnet:bob> hello world"

def test_search_limit(tmp_path):
    settings = Settings(DB_PATH=str(tmp_path / "limit.sqlite3"), SEARCH_LIMIT=3)
    initialize_archive(settings)
    root = tmp_path / "many"
    for day in range(1, 6):
        write_log(root, "general", f"2023-01-0{day}", [f"12:00 <alice> cats day {day}"])
    ImportService(settings).run(root)

    assert len(SearchService(settings).search("cats").records) == 3

def test_candidate_lookup_returns_full_records(imported):
    conn = get_db_connection(imported)
    try:
        records = candidate_lookup(conn, build_match_expression("deploy"))
    finally:
        conn.close()
    assert len(records) == 1
    assert records[0].channel == "dev"
    assert records[0].content.count("\n") == 1  # Both lines of the day, unrefined

def test_candidate_lookup_with_channel(imported):
    conn = get_db_connection(imported)
    try:
        assert candidate_lookup(conn, build_match_expression("deploy"), channel="general") == []
    finally:
        conn.close()

def test_refine_lines_matches_case_insensitively():
    record = LogRecord(id=1, channel="general", log_date="2023-01-01",
                       content="12:00 <alice> Cats!\n12:01 <bob> dogs\n12:02 <carol> CATS again")
    refined = refine_lines(record, "cAtS")
    assert refined.content == "12:00 <alice> Cats!\n12:02 <carol> CATS again"
    assert record.content.startswith("12:00 <alice> Cats!\n12:01")  # Original left untouched

def test_refine_lines_ignores_speaker_names():
    record = LogRecord(id=1, channel="general", log_date="2023-01-01",
                       content="12:00 <cats> hello\n12:01 <bob> hi")
    refined = refine_lines(record, "cats", preview_chars=8)
    assert refined.content == "12:00 <c"

def test_refine_lines_falls_back_to_prefix():
    content = "12:00 <alice> " + "あ" * 300
    record = LogRecord(id=1, channel="general", log_date="2023-01-01", content=content)
    refined = refine_lines(record, "zebra")
    assert refined.content == content[:256]
    assert len(refined.content) == 256

def test_helpers():
    assert prefix("abc", 2) == "ab"
    assert prefix("abc", 10) == "abc"
    assert first_word("  Hello World ") == "hello"
    assert first_word("   ") == ""
