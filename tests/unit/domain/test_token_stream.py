"""Tests for the token model and TokenStream's derived index."""

import unittest

import pytest

from operator_spacing_linter.domain.token_stream import TokenStream
from operator_spacing_linter.domain.tokens import OperatorCategory, Token, TokenKind
from tests.token_helpers import index_of, lex


class TestTokenKind(unittest.TestCase):
    def test_from_name_accepts_prefixed_and_bare_names(self) -> None:
        self.assertIs(TokenKind.from_name("T_EQUAL"), TokenKind.EQUAL)
        self.assertIs(TokenKind.from_name("equal"), TokenKind.EQUAL)
        self.assertIs(TokenKind.from_name(" T_IS_IDENTICAL "), TokenKind.IS_IDENTICAL)

    def test_from_name_rejects_unknown(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown token type"):
            TokenKind.from_name("T_NOT_A_TOKEN")

    def test_from_name_default_for_unknown(self) -> None:
        self.assertIs(TokenKind.from_name("T_PUBLIC", default=TokenKind.OTHER), TokenKind.OTHER)
        self.assertIs(TokenKind.from_name("T_EQUAL", default=TokenKind.OTHER), TokenKind.EQUAL)

    def test_operator_category(self) -> None:
        self.assertIs(OperatorCategory.of(TokenKind.EQUAL), OperatorCategory.ASSIGNMENT)
        self.assertIs(OperatorCategory.of(TokenKind.DOUBLE_ARROW), OperatorCategory.ASSIGNMENT)
        self.assertIs(OperatorCategory.of(TokenKind.IS_EQUAL), OperatorCategory.COMPARISON)
        self.assertIs(OperatorCategory.of(TokenKind.STRING_CONCAT), OperatorCategory.GENERAL)
        self.assertIs(OperatorCategory.of(TokenKind.MINUS), OperatorCategory.MINUS)
        self.assertIs(OperatorCategory.of(TokenKind.BITWISE_AND), OperatorCategory.BITWISE_AND)
        self.assertIs(OperatorCategory.of(TokenKind.BOOLEAN_NOT), OperatorCategory.NOT)
        self.assertIsNone(OperatorCategory.of(TokenKind.VARIABLE))

    def test_token_is_whitespace(self) -> None:
        self.assertTrue(Token(TokenKind.WHITESPACE, " ").is_whitespace)
        self.assertFalse(Token(TokenKind.EQUAL, "=").is_whitespace)


class TestFromContents(unittest.TestCase):
    def test_positions_are_recomputed(self) -> None:
        stream = lex("$a = 1;\n  $b=2;")
        positions = [(t.content, t.line, t.column) for t in stream]
        self.assertEqual(positions[:3], [("$a", 1, 1), (" ", 1, 3), ("=", 1, 4)])
        b = index_of(stream, "$b")
        self.assertEqual((stream[b].line, stream[b].column), (2, 3))
        self.assertEqual(stream[b - 1].content, "  ")
        self.assertEqual(stream[b - 1].column, 1)

    def test_whitespace_is_merged_then_split_per_line(self) -> None:
        stream = TokenStream.from_contents(
            [
                (TokenKind.VARIABLE, "$a"),
                (TokenKind.WHITESPACE, " "),
                (TokenKind.WHITESPACE, "\n"),
                (TokenKind.WHITESPACE, "\n    "),
                (TokenKind.EQUAL, "="),
            ]
        )
        self.assertEqual([t.content for t in stream], ["$a", " \n", "\n", "    ", "="])
        self.assertEqual(stream[3].column, 1)
        self.assertEqual(stream[4].line, 3)

    def test_empty_tokens_are_dropped(self) -> None:
        stream = TokenStream.from_contents(
            [(TokenKind.VARIABLE, "$a"), (TokenKind.STRING, ""), (TokenKind.WHITESPACE, ""), (TokenKind.EQUAL, "=")]
        )
        self.assertEqual([t.kind for t in stream], [TokenKind.VARIABLE, TokenKind.EQUAL])

    def test_content_reassembles_source(self) -> None:
        source = "if ( $a==$b ) {\n\t$c = -1;\n}\n"
        stream = lex(source, filename="x.php")
        self.assertEqual(stream.content, source)
        self.assertEqual(stream.filename, "x.php")


class TestNavigation:
    def test_get_returns_none_out_of_range(self) -> None:
        stream = lex("$a=1;")
        assert stream.get(None) is None
        assert stream.get(-1) is None
        assert stream.get(len(stream)) is None
        assert stream.get(0).content == "$a"

    def test_find_non_whitespace(self) -> None:
        stream = lex("$a   =   1;")
        equal = index_of(stream, "=")
        assert stream.find_previous_non_whitespace(equal - 1) == 0
        assert stream[stream.find_next_non_whitespace(equal + 1)].content == "1"
        assert stream.find_previous_non_whitespace(-1) is None
        assert stream.find_next_non_whitespace(len(stream)) is None

    def test_find_previous_clamps_start(self) -> None:
        stream = lex("$a ")
        assert stream.find_previous_non_whitespace(100) == 0


class TestBracketIndex:
    def test_matching_brackets(self) -> None:
        stream = lex("foo( $a[1], { } );")
        open_paren = index_of(stream, "(")
        close_paren = index_of(stream, ")")
        assert stream.matching_bracket(open_paren) == close_paren
        assert stream.matching_bracket(close_paren) == open_paren
        assert stream.matching_bracket(index_of(stream, "[")) == index_of(stream, "]")
        assert stream.matching_bracket(index_of(stream, "{")) == index_of(stream, "}")
        assert stream.matching_bracket(0) is None

    def test_unbalanced_brackets_are_tolerated(self) -> None:
        stream = lex("foo( $a ]")
        assert stream.matching_bracket(index_of(stream, "(")) is None
        assert stream.matching_bracket(index_of(stream, "]")) is None

    def test_nested_parenthesis_outermost_first(self) -> None:
        stream = lex("foo( bar( $a ) );")
        outer = index_of(stream, "(", 0)
        inner = index_of(stream, "(", 1)
        a = index_of(stream, "$a")
        assert stream.nested_parenthesis(a) == (outer, inner)
        assert stream.enclosing_parenthesis(a) == inner
        assert stream.nested_parenthesis(outer) == ()
        assert stream.enclosing_parenthesis(0) is None

    def test_square_brackets_are_not_parentheses(self) -> None:
        stream = lex("$a[ $b ];")
        assert stream.nested_parenthesis(index_of(stream, "$b")) == ()


class TestParenthesisOwner:
    @pytest.mark.parametrize(
        ("source", "owner"),
        [
            ("function foo( $a ) {}", "function"),
            ("function &foo( $a ) {}", "function"),
            ("$f = function( $a ) {};", "function"),
            ("if ( $a ) {}", "if"),
            ("while ( $a ) {}", "while"),
            ("$x = array( 1 );", "array"),
        ],
    )
    def test_owner_keyword(self, source: str, owner: str) -> None:
        stream = lex(source)
        opener = index_of(stream, "(")
        assert stream[stream.parenthesis_owner(opener)].content == owner

    def test_closure_owner_kind(self) -> None:
        stream = lex("$f = function( $a ) {};")
        owner = stream.parenthesis_owner(index_of(stream, "("))
        assert stream[owner].kind is TokenKind.CLOSURE

    def test_function_call_has_no_owner(self) -> None:
        stream = lex("foo( $a );")
        assert stream.parenthesis_owner(index_of(stream, "(")) is None

    def test_grouping_parenthesis_has_no_owner(self) -> None:
        stream = lex("$a = ( $b + 1 );")
        assert stream.parenthesis_owner(index_of(stream, "(")) is None
