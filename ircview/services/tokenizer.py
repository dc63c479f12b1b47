# file: ircview/services/tokenizer.py
"""
Character n-gram tokens for the search index.

Chat logs mix English and Japanese, and Japanese has no spaces between words,
so both messages and queries are cut into overlapping bigrams instead of words.
The same function runs on both sides, which keeps indexed and query tokens
symmetric.
"""

import logging
from typing import Iterable, List

log = logging.getLogger("api.services.tokenizer")

DEFAULT_NGRAM_SIZE = 2

def create_ngrams(text: str, n: int = DEFAULT_NGRAM_SIZE) -> List[str]:
    """Lower-cases the text and returns every overlapping window of n code points."""
    chars = text.lower()
    return [chars[i:i + n] for i in range(len(chars) - n + 1)]

def index_content(messages: Iterable[str], n: int = DEFAULT_NGRAM_SIZE) -> str:
    """Builds the token document stored in search_tokens for one log record."""
    ngrams: List[str] = []
    for message in messages:
        ngrams.extend(create_ngrams(message, n))
    return " ".join(ngrams)

def query_tokens(query: str, n: int = DEFAULT_NGRAM_SIZE) -> List[str]:
    """
    Returns the n-grams of a search query that are safe to put in a MATCH expression.

    Tokens with a double quote would break the phrase syntax. Tokens without a
    letter or digit (e.g. "  " or ", ") reduce to an empty phrase in the index
    tokenizer, so they are dropped as well.
    """
    tokens = []
    for token in create_ngrams(query, n):
        if '"' in token:
            continue
        if not any(ch.isalnum() for ch in token):
            continue
        tokens.append(token)
    return list(dict.fromkeys(tokens))

def build_match_expression(query: str, n: int = DEFAULT_NGRAM_SIZE) -> str:
    """Quotes every query token and joins them into a conjunctive phrase query."""
    tokens = query_tokens(query, n)
    expression = " ".join(f'"{token}"' for token in tokens)
    log.debug(f"Match expression for {query!r}: {expression}")
    return expression
