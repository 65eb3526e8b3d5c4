import re

import pytest

from cfgparse.codes import Operator, Special, TokenType
from cfgparse.parser import Parser
from cfgparse.sql_select import (
    parse_column,
    parse_columns,
    parse_select_query,
    parse_table,
)


def lex(text):
    if not text:
        return Special.END_OF_LINE, ""
    if text[0] == "\n":
        return Special.END_OF_LINE, "\n"
    match = re.match(r"[ \t]+", text)
    if match:
        return Special.WHITESPACE, match.group()
    match = re.match(r"\d+", text)
    if match:
        return TokenType.INTEGERS_COLLECTION, match.group()
    match = re.match(r"[A-Za-z_]\w*", text)
    if match:
        return TokenType.VARIABLE, match.group()
    if text[0] == ",":
        return Operator.COMMA, ","
    return Special.NOT_IN_A_DICTIONARY, text[0]


def make_parser(text):
    parser = Parser(lex)
    parser.scan(text)
    return parser


def token_texts(parser):
    texts = []
    while len(parser.stack):
        entry = parser.stack.pop()
        if entry.code != Special.WHITESPACE:
            texts.append(entry.text)
    return texts[::-1]


@pytest.mark.parametrize(
    "text",
    [
        "SELECT a FROM t\n",
        "select a, b, c from users\n",
        "SeLeCt name FrOm people\n",
        "SELECT a FROM 42\n",
    ],
)
def test_valid_query_stops_before_end_of_line(text):
    parser = make_parser(text)
    assert parse_select_query(parser) is True
    assert parser.position == len(text) - 1
    assert parser.stack.peek().text == text.split()[-1]


def test_valid_query_records_every_token():
    parser = make_parser("SELECT a, b FROM t\n")
    assert parse_select_query(parser) is True
    assert token_texts(parser) == ["SELECT", "a", ",", "b", "FROM", "t"]


@pytest.mark.parametrize(
    "text",
    [
        "SELECT FROM t\n",
        "SELECT a FROM t extra\n",
        "UPDATE a FROM t\n",
        "SELECT a b FROM t\n",
        "SELECT 1 FROM t\n",
        "SELECT a, FROM t\n",
        "SELECT a INTO t\n",
    ],
)
def test_invalid_query_leaves_parser_untouched(text):
    parser = make_parser(text)
    assert parse_select_query(parser) is False
    assert parser.position == 0
    assert len(parser.stack) == 0


def test_columns_list_is_consumed():
    parser = make_parser("a, b, c\n")
    assert parse_columns(parser) is True
    assert parser.position == len("a, b, c")
    assert token_texts(parser) == ["a", ",", "b", ",", "c"]


def test_columns_stop_before_bad_continuation():
    parser = make_parser("a, 1\n")
    assert parse_columns(parser) is True
    assert parser.position == len("a")
    assert parser.forward() == Operator.COMMA


def test_columns_fail_without_a_column():
    parser = make_parser("1, a\n")
    assert parse_columns(parser) is False
    assert parser.position == 0
    assert len(parser.stack) == 0


def test_column_accepts_variable():
    parser = make_parser("x\n")
    assert parse_column(parser) is True
    assert parser.stack.peek().code == TokenType.VARIABLE
    assert parser.stack.peek().text == "x"


def test_column_rejects_comma():
    parser = make_parser(", x\n")
    assert parse_column(parser) is False
    assert parser.position == 0
    assert len(parser.stack) == 0


def test_table_consumes_nothing():
    parser = make_parser("t\n")
    assert parse_table(parser) is True
    assert parser.position == 0
    assert len(parser.stack) == 0