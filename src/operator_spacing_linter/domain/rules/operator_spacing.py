"""Operator Spacing rule: exactly one space on both sides of comparison, logical, string, assignment and arithmetic operators."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from operator_spacing_linter.domain.constants import (
    MSG_NO_SPACE_AFTER,
    MSG_NO_SPACE_BEFORE,
    MSG_SPACING_AFTER,
    MSG_SPACING_BEFORE,
    NO_SPACE_AFTER,
    NO_SPACE_BEFORE,
    SNIFF_PREFIX,
    SPACING_AFTER,
    SPACING_BEFORE,
)
from operator_spacing_linter.domain.tokens import (
    ASSIGNMENT_KINDS,
    COMPARISON_KINDS,
    FUNCTION_DECLARATION_KINDS,
    OPERATOR_KINDS,
    OperatorCategory,
    Token,
    TokenKind,
)

if TYPE_CHECKING:
    from operator_spacing_linter.domain.protocols import ReportingFileProtocol
    from operator_spacing_linter.domain.token_stream import TokenStream


def _is_return(prev: Token) -> bool:
    # return -1;
    return prev.kind is TokenKind.RETURN


def _is_operand(prev: Token) -> bool:
    # $var * -1
    return prev.kind in OPERATOR_KINDS


def _is_compared(prev: Token) -> bool:
    # $var === -1
    return prev.kind in COMPARISON_KINDS


def _is_argument(prev: Token) -> bool:
    # foo( $var, -2 ), $list[-1]
    return prev.kind in (
        TokenKind.COMMA,
        TokenKind.OPEN_PARENTHESIS,
        TokenKind.OPEN_SQUARE_BRACKET,
    )


# Checked in order against the token before a '-'. Any match means the '-'
# signs a literal instead of subtracting.
SIGNED_LITERAL_CONTEXTS: tuple[Callable[[Token], bool], ...] = (
    _is_return,
    _is_operand,
    _is_compared,
    _is_argument,
)


class OperatorSpacingRule:
    """
    Rule for WhiteSpace.OperatorSpacing.

    "Always put spaces on both sides of logical, comparison, string and
    assignment operators."

    Exemptions:
    - '=&' reference assignment, and '=' inside a function or closure
      signature (default parameter values).
    - '&' is left alone entirely (reference vs. bitwise is another rule's call).
    - '-' that signs a literal: after return, an operator, a comparison,
      a comma, '(' or '[', or in '$x = -1;'.
    - Several spaces before an assignment operator (alignment), and any
      run of spaces that is the line's indentation.

    '-' only gets the before check; '-1' style literals are never reported
    for the space after the sign.
    """

    code: str = SNIFF_PREFIX
    description: str = "Operators must be surrounded by exactly one space on each side."
    fix_type: str = "code"

    def __init__(self, allow_assignment_alignment: bool = True) -> None:
        self.allow_assignment_alignment = allow_assignment_alignment

    def register(self) -> frozenset[TokenKind]:
        """Comparison, operator and assignment kinds, plus '!'."""
        return COMPARISON_KINDS | OPERATOR_KINDS | ASSIGNMENT_KINDS | {TokenKind.BOOLEAN_NOT}

    def process(self, file: "ReportingFileProtocol", index: int) -> None:
        """Check the spacing around the operator at index. Call once per occurrence."""
        tokens = file.tokens
        token = tokens.get(index)
        if token is None:
            return

        category = OperatorCategory.of(token.kind)
        if category is None or category is OperatorCategory.BITWISE_AND:
            return
        if token.kind is TokenKind.EQUAL and self._is_exempt_assignment(tokens, index):
            return
        if category is OperatorCategory.MINUS and self._is_signed_literal(tokens, index):
            return

        self._check_before(file, index, token, category)
        if token.content != "-":
            self._check_after(file, index, token)

    def _is_exempt_assignment(self, tokens: "TokenStream", index: int) -> bool:
        """True for '=&' and for '=' inside a function/closure parameter list."""
        following = tokens.get(index + 1)
        if following is not None and following.kind is TokenKind.BITWISE_AND:
            return True

        opener = tokens.enclosing_parenthesis(index)
        if opener is None:
            return False
        owner = tokens.get(tokens.parenthesis_owner(opener))
        return owner is not None and owner.kind in FUNCTION_DECLARATION_KINDS

    def _is_signed_literal(self, tokens: "TokenStream", index: int) -> bool:
        """True when the '-' at index is the sign of a number rather than a subtraction."""
        prev = tokens.get(tokens.find_previous_non_whitespace(index - 1))
        if prev is not None and any(context(prev) for context in SIGNED_LITERAL_CONTEXTS):
            return True

        number_index = tokens.find_next_non_whitespace(index + 1)
        number = tokens.get(number_index)
        if number is None or number.kind is not TokenKind.LNUMBER:
            return False
        terminator = tokens.get(tokens.find_next_non_whitespace(number_index + 1))
        if terminator is None or terminator.kind is not TokenKind.SEMICOLON:
            return False
        # $x = -1;
        return prev is not None and prev.kind in ASSIGNMENT_KINDS

    def _check_before(
        self,
        file: "ReportingFileProtocol",
        index: int,
        token: Token,
        category: OperatorCategory,
    ) -> None:
        before = file.tokens.get(index - 1)
        if before is None:
            return

        if not before.is_whitespace:
            data = (token.content,)
            if file.add_fixable_error(MSG_NO_SPACE_BEFORE, index, f"{self.code}.{NO_SPACE_BEFORE}", data):
                with file.fixer.changeset():
                    file.fixer.add_content_before(index, " ")
            return

        found = len(before.content)
        if found == 1 or before.column == 1:
            return
        if category is OperatorCategory.ASSIGNMENT and self.allow_assignment_alignment:
            return

        data = (token.content, str(found))
        if file.add_fixable_error(MSG_SPACING_BEFORE, index, f"{self.code}.{SPACING_BEFORE}", data):
            with file.fixer.changeset():
                file.fixer.replace_token(index - 1, " ")

    def _check_after(self, file: "ReportingFileProtocol", index: int, token: Token) -> None:
        after = file.tokens.get(index + 1)
        if after is None:
            return

        if not after.is_whitespace:
            data = (token.content,)
            if file.add_fixable_error(MSG_NO_SPACE_AFTER, index, f"{self.code}.{NO_SPACE_AFTER}", data):
                with file.fixer.changeset():
                    file.fixer.add_content(index, " ")
            return

        found = len(after.content)
        if found == 1:
            return

        data = (token.content, str(found))
        if file.add_fixable_error(MSG_SPACING_AFTER, index, f"{self.code}.{SPACING_AFTER}", data):
            with file.fixer.changeset():
                file.fixer.replace_token(index + 1, " ")
