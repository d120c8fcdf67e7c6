import dataclasses

import pytest

from cscan.errors import UnrecognizedTokenError
from cscan.lexer import Token, TokenKind, classify, lex, tokenize

KW, OP, NUM, ID = (TokenKind.KEYWORD, TokenKind.OPERATOR,
                   TokenKind.NUMERIC_CONSTANT, TokenKind.IDENTIFIER)


def pairs(tokens):
    return [(t.kind, t.lexeme) for t in tokens]


def test_two_char_operator_limit():
    assert pairs(tokenize("a<<=b")) == [(ID, "a"), (OP, "<<"), (OP, "="), (ID, "b")]
    assert pairs(tokenize("<<=b")) == [(OP, "<<"), (OP, "="), (ID, "b")]


def test_maximal_munch():
    assert pairs(tokenize("a==b!=c")) == [(ID, "a"), (OP, "=="), (ID, "b"), (OP, "!="), (ID, "c")]
    assert pairs(tokenize("p->q")) == [(ID, "p"), (OP, "->"), (ID, "q")]
    assert pairs(tokenize("i++")) == [(ID, "i"), (OP, "++")]
    assert pairs(tokenize("x+-y")) == [(ID, "x"), (OP, "+"), (OP, "-"), (ID, "y")]


def test_classification_order():
    assert classify("while") is KW
    assert classify("whilex") is ID
    assert classify("42") is NUM
    assert classify("3.14") is NUM
    assert classify("_x1") is ID
    assert classify("0xFF") is None
    assert classify("1.5.2") is None


def test_decimal_constants():
    assert pairs(tokenize("x = 3.14")) == [(ID, "x"), (OP, "="), (NUM, "3.14")]
    assert pairs(tokenize("3.14.15")) == [(NUM, "3.14"), (OP, "."), (NUM, "15")]
    assert pairs(tokenize("12.")) == [(NUM, "12"), (OP, ".")]
    assert pairs(tokenize("1.x")) == [(NUM, "1"), (OP, "."), (ID, "x")]
    assert pairs(tokenize("a.b")) == [(ID, "a"), (OP, "."), (ID, "b")]


def test_malformed_number_is_reported():
    res = lex("0xFF")
    assert res.tokens == []
    assert len(res.diagnostics) == 1
    err = res.diagnostics[0]
    assert isinstance(err, UnrecognizedTokenError)
    assert err.reason == "malformed"
    assert err.lexeme == "0xFF"
    assert (err.line, err.column) == (1, 1)


def test_unknown_punctuation_is_reported():
    res = lex("int x = 10; \n")
    assert pairs(res.tokens) == [(KW, "int"), (ID, "x"), (OP, "="), (NUM, "10")]
    assert [(d.reason, d.lexeme) for d in res.diagnostics] == [("operator", ";")]
    assert res.breaks == [4]
    assert len(lex("{}").diagnostics) == 2


def test_token_count_matches_units():
    assert len(tokenize("a + b * c - 12")) == 7


def test_positions_in_scanned_text():
    toks = lex("int x\n  y").tokens
    assert [(t.line, t.column) for t in toks] == [(1, 1), (1, 5), (2, 3)]


def test_custom_sets():
    res = lex("foo bar", keywords=frozenset({"foo"}))
    assert pairs(res.tokens) == [(KW, "foo"), (ID, "bar")]
    res = lex("a<=b", operators=frozenset({"+"}))
    assert pairs(res.tokens) == [(ID, "a"), (ID, "b")]
    assert [d.lexeme for d in res.diagnostics] == ["<", "="]


def test_tokens_are_immutable():
    tok = Token(ID, "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.lexeme = "y"
    assert tok == Token(ID, "x", 0, 0)
