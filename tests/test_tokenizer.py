# file: tests/test_tokenizer.py
from ircview.services.tokenizer import build_match_expression, create_ngrams, index_content, query_tokens

def test_bigrams_are_lowercased_and_overlapping():
    assert create_ngrams("HeLLo") == ["he", "el", "ll", "lo"]

def test_short_input_yields_no_tokens():
    assert create_ngrams("") == []
    assert create_ngrams("a") == []

def test_bigrams_use_code_points_not_bytes():
    assert create_ngrams("障害発生") == ["障害", "害発", "発生"]

def test_ngram_size_is_configurable():
    assert create_ngrams("abcd", 3) == ["abc", "bcd"]

def test_index_content_joins_tokens_of_all_messages():
    assert index_content(["hi", "yo!"]) == "hi yo o!"

def test_query_tokens_match_indexed_tokens():
    indexed = set(index_content(["hello"]).split(" "))
    for query in ["he", "el", "ll", "lo", "hello"]:
        assert set(query_tokens(query)) <= indexed

def test_query_tokens_drop_quotes_and_separator_only_tokens():
    assert query_tokens('a"b') == []
    assert query_tokens("a  b") == ["a ", " b"]

def test_query_tokens_are_deduplicated_in_order():
    assert query_tokens("abab") == ["ab", "ba"]

def test_match_expression_quotes_each_token():
    assert build_match_expression("cats") == '"ca" "at" "ts"'
    assert build_match_expression('"') == ""
