"""Tests for query parsing."""

import pytest

import config
from search_server import BadArgument, QueryParser, Tokenizer


@pytest.fixture
def parser():
    return QueryParser(Tokenizer(config), frozenset({"и", "в", "на"}))


def test_classifies_plus_minus_and_stop_words(parser):
    query = parser.parse("пушистый -ошейник и кот -в")
    assert query.plus_words == {"пушистый", "кот"}
    assert query.minus_words == {"ошейник"}
    assert query.stop_words == {"и", "в"}
    assert not query.is_stop_only


def test_duplicate_words_collapse(parser):
    query = parser.parse("кот кот -пёс -пёс")
    assert query.plus_words == {"кот"}
    assert query.minus_words == {"пёс"}


def test_stop_only_query(parser):
    query = parser.parse("и в")
    assert query.is_stop_only


def test_blank_query_is_not_stop_only(parser):
    query = parser.parse("   ")
    assert not query.plus_words and not query.minus_words and not query.stop_words
    assert not query.is_stop_only


def test_minus_only_query(parser):
    query = parser.parse("-кот")
    assert query.plus_words == set()
    assert query.minus_words == {"кот"}


def test_word_can_be_plus_and_minus(parser):
    query = parser.parse("love -love")
    assert query.plus_words == {"love"}
    assert query.minus_words == {"love"}


def test_inner_dash_is_kept(parser):
    query = parser.parse("кот-пёс")
    assert query.plus_words == {"кот-пёс"}


@pytest.mark.parametrize("raw_query", [
    "",
    "-",
    "кот -",
    "--кот",
    "кот \x02",
    "кот\tпёс",
    "кот\n",
])
def test_malformed_queries_raise(parser, raw_query):
    with pytest.raises(BadArgument):
        parser.parse(raw_query)


def test_parse_query_word(parser):
    word = parser.parse_query_word("-кот")
    assert word.data == "кот"
    assert word.is_minus
    assert not word.is_stop
    assert parser.parse_query_word("-и").is_stop
