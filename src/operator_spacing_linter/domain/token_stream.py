"""Immutable token sequence with a derived bracket/ownership index."""

import re
from collections.abc import Iterable, Iterator, Sequence

from operator_spacing_linter.domain.tokens import (
    FUNCTION_DECLARATION_KINDS,
    OPENING_BRACKETS,
    PARENTHESIS_OWNER_KINDS,
    Token,
    TokenKind,
)

_CLOSING_BRACKETS: frozenset[TokenKind] = frozenset(OPENING_BRACKETS.values())
_LINE_PIECE = re.compile(r"[^\n]*\n|[^\n]+")


class TokenStream:
    """
    Read-only view over one file's tokens.

    The index (matching brackets, enclosing parentheses, parenthesis owners)
    is derived once at construction. A stream is never edited in place; the
    fixer builds a new stream after every pass.
    """

    def __init__(self, tokens: Sequence[Token], filename: str = "") -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self.filename = filename
        self._bracket_match: dict[int, int] = {}
        self._nested_parenthesis: dict[int, tuple[int, ...]] = {}
        self._parenthesis_owner: dict[int, int] = {}
        self._derive_index()

    @classmethod
    def from_contents(
        cls, pairs: Iterable[tuple[TokenKind, str]], filename: str = ""
    ) -> "TokenStream":
        """
        Build a stream from (kind, content) pairs.

        Whitespace is merged and re-split per line so each piece ends at a
        newline, empty tokens are dropped, and line/column are recomputed.
        """
        return cls(cls._position(cls._normalize_whitespace(pairs)), filename)

    @staticmethod
    def _normalize_whitespace(
        pairs: Iterable[tuple[TokenKind, str]],
    ) -> list[tuple[TokenKind, str]]:
        result: list[tuple[TokenKind, str]] = []
        pending = ""
        for kind, content in pairs:
            if kind is TokenKind.WHITESPACE:
                pending += content
                continue
            if pending:
                result.extend((TokenKind.WHITESPACE, piece) for piece in _LINE_PIECE.findall(pending))
                pending = ""
            if content:
                result.append((kind, content))
        if pending:
            result.extend((TokenKind.WHITESPACE, piece) for piece in _LINE_PIECE.findall(pending))
        return result

    @staticmethod
    def _position(pairs: Iterable[tuple[TokenKind, str]]) -> list[Token]:
        tokens: list[Token] = []
        line, column = 1, 1
        for kind, content in pairs:
            tokens.append(Token(kind=kind, content=content, line=line, column=column))
            newlines = content.count("\n")
            if newlines:
                line += newlines
                column = len(content) - content.rfind("\n")
            else:
                column += len(content)
        return tokens

    def _derive_index(self) -> None:
        stack: list[int] = []
        for index, token in enumerate(self._tokens):
            kind = token.kind
            if kind in _CLOSING_BRACKETS and stack:
                opener = stack[-1]
                if OPENING_BRACKETS[self._tokens[opener].kind] is kind:
                    stack.pop()
                    self._bracket_match[opener] = index
                    self._bracket_match[index] = opener

            enclosing = tuple(
                i for i in stack if self._tokens[i].kind is TokenKind.OPEN_PARENTHESIS
            )
            if enclosing:
                self._nested_parenthesis[index] = enclosing

            if kind in OPENING_BRACKETS:
                stack.append(index)
                if kind is TokenKind.OPEN_PARENTHESIS:
                    owner = self._find_owner(index)
                    if owner is not None:
                        self._parenthesis_owner[index] = owner

    def _find_owner(self, opener: int) -> int | None:
        prev = self.find_previous_non_whitespace(opener - 1)
        if prev is None:
            return None
        if self._tokens[prev].kind in PARENTHESIS_OWNER_KINDS:
            return prev
        # function name(, function &name(, function &(
        if self._tokens[prev].kind is TokenKind.STRING:
            prev = self.find_previous_non_whitespace(prev - 1)
        while prev is not None and self._tokens[prev].kind is TokenKind.BITWISE_AND:
            prev = self.find_previous_non_whitespace(prev - 1)
        if prev is not None and self._tokens[prev].kind in FUNCTION_DECLARATION_KINDS:
            return prev
        return None

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def content(self) -> str:
        """Source text reassembled from token contents."""
        return "".join(token.content for token in self._tokens)

    def get(self, index: int | None) -> Token | None:
        """Token at index, or None when the index is missing or out of range."""
        if index is None or index < 0 or index >= len(self._tokens):
            return None
        return self._tokens[index]

    def find_previous_non_whitespace(self, start: int) -> int | None:
        """Index of the nearest non-whitespace token at or before start."""
        index = min(start, len(self._tokens) - 1)
        while index >= 0:
            if not self._tokens[index].is_whitespace:
                return index
            index -= 1
        return None

    def find_next_non_whitespace(self, start: int) -> int | None:
        """Index of the nearest non-whitespace token at or after start."""
        index = max(start, 0)
        while index < len(self._tokens):
            if not self._tokens[index].is_whitespace:
                return index
            index += 1
        return None

    def matching_bracket(self, index: int) -> int | None:
        return self._bracket_match.get(index)

    def nested_parenthesis(self, index: int) -> tuple[int, ...]:
        """Opening parentheses enclosing index, outermost first."""
        return self._nested_parenthesis.get(index, ())

    def enclosing_parenthesis(self, index: int) -> int | None:
        """Innermost opening parenthesis enclosing index."""
        nested = self.nested_parenthesis(index)
        return nested[-1] if nested else None

    def parenthesis_owner(self, opener: int) -> int | None:
        """Index of the keyword that owns the parenthesis opened at opener."""
        return self._parenthesis_owner.get(opener)
