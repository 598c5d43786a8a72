"""Token model consumed by rules. Pure data; the tokenizer lives outside this package."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed set of token kinds produced by the external tokenizer."""

    WHITESPACE = "T_WHITESPACE"
    STRING = "T_STRING"
    VARIABLE = "T_VARIABLE"
    LNUMBER = "T_LNUMBER"
    DNUMBER = "T_DNUMBER"
    CONSTANT_ENCAPSED_STRING = "T_CONSTANT_ENCAPSED_STRING"
    OPEN_TAG = "T_OPEN_TAG"
    CLOSE_TAG = "T_CLOSE_TAG"
    COMMENT = "T_COMMENT"
    INLINE_HTML = "T_INLINE_HTML"
    # Any tokenizer kind the rule has no reason to tell apart (T_TRUE, T_PUBLIC, ...)
    OTHER = "T_OTHER"

    # Keywords
    RETURN = "T_RETURN"
    FUNCTION = "T_FUNCTION"
    CLOSURE = "T_CLOSURE"
    FN = "T_FN"
    IF = "T_IF"
    ELSEIF = "T_ELSEIF"
    WHILE = "T_WHILE"
    FOR = "T_FOR"
    FOREACH = "T_FOREACH"
    SWITCH = "T_SWITCH"
    CATCH = "T_CATCH"
    ARRAY = "T_ARRAY"
    LIST = "T_LIST"
    ECHO = "T_ECHO"
    NEW = "T_NEW"
    AS = "T_AS"

    # Punctuation
    SEMICOLON = "T_SEMICOLON"
    COMMA = "T_COMMA"
    COLON = "T_COLON"
    INLINE_THEN = "T_INLINE_THEN"
    OPEN_PARENTHESIS = "T_OPEN_PARENTHESIS"
    CLOSE_PARENTHESIS = "T_CLOSE_PARENTHESIS"
    OPEN_SQUARE_BRACKET = "T_OPEN_SQUARE_BRACKET"
    CLOSE_SQUARE_BRACKET = "T_CLOSE_SQUARE_BRACKET"
    OPEN_CURLY_BRACKET = "T_OPEN_CURLY_BRACKET"
    CLOSE_CURLY_BRACKET = "T_CLOSE_CURLY_BRACKET"
    OBJECT_OPERATOR = "T_OBJECT_OPERATOR"
    DOUBLE_COLON = "T_DOUBLE_COLON"
    INC = "T_INC"
    DEC = "T_DEC"

    # Comparison
    IS_EQUAL = "T_IS_EQUAL"
    IS_NOT_EQUAL = "T_IS_NOT_EQUAL"
    IS_IDENTICAL = "T_IS_IDENTICAL"
    IS_NOT_IDENTICAL = "T_IS_NOT_IDENTICAL"
    LESS_THAN = "T_LESS_THAN"
    GREATER_THAN = "T_GREATER_THAN"
    IS_SMALLER_OR_EQUAL = "T_IS_SMALLER_OR_EQUAL"
    IS_GREATER_OR_EQUAL = "T_IS_GREATER_OR_EQUAL"
    SPACESHIP = "T_SPACESHIP"
    COALESCE = "T_COALESCE"

    # Arithmetic, bitwise, string and logical operators
    MINUS = "T_MINUS"
    PLUS = "T_PLUS"
    MULTIPLY = "T_MULTIPLY"
    DIVIDE = "T_DIVIDE"
    MODULUS = "T_MODULUS"
    POW = "T_POW"
    SL = "T_SL"
    SR = "T_SR"
    BITWISE_AND = "T_BITWISE_AND"
    BITWISE_OR = "T_BITWISE_OR"
    BITWISE_XOR = "T_BITWISE_XOR"
    STRING_CONCAT = "T_STRING_CONCAT"
    BOOLEAN_AND = "T_BOOLEAN_AND"
    BOOLEAN_OR = "T_BOOLEAN_OR"
    LOGICAL_AND = "T_LOGICAL_AND"
    LOGICAL_OR = "T_LOGICAL_OR"
    LOGICAL_XOR = "T_LOGICAL_XOR"
    INSTANCEOF = "T_INSTANCEOF"
    BOOLEAN_NOT = "T_BOOLEAN_NOT"

    # Assignment
    EQUAL = "T_EQUAL"
    PLUS_EQUAL = "T_PLUS_EQUAL"
    MINUS_EQUAL = "T_MINUS_EQUAL"
    MUL_EQUAL = "T_MUL_EQUAL"
    DIV_EQUAL = "T_DIV_EQUAL"
    MOD_EQUAL = "T_MOD_EQUAL"
    POW_EQUAL = "T_POW_EQUAL"
    CONCAT_EQUAL = "T_CONCAT_EQUAL"
    AND_EQUAL = "T_AND_EQUAL"
    OR_EQUAL = "T_OR_EQUAL"
    XOR_EQUAL = "T_XOR_EQUAL"
    SL_EQUAL = "T_SL_EQUAL"
    SR_EQUAL = "T_SR_EQUAL"
    COALESCE_EQUAL = "T_COALESCE_EQUAL"
    DOUBLE_ARROW = "T_DOUBLE_ARROW"

    @classmethod
    def from_name(cls, name: str, default: "TokenKind | None" = None) -> "TokenKind":
        """
        Resolve 'T_EQUAL' or 'EQUAL' to a kind.

        Unknown names resolve to default; without one they raise ValueError.
        """
        key = name.strip().upper()
        if key.startswith("T_"):
            key = key[2:]
        try:
            return cls[key]
        except KeyError:
            if default is not None:
                return default
            raise ValueError(f"Unknown token type: {name!r}") from None


COMPARISON_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.IS_EQUAL,
    TokenKind.IS_NOT_EQUAL,
    TokenKind.IS_IDENTICAL,
    TokenKind.IS_NOT_IDENTICAL,
    TokenKind.LESS_THAN,
    TokenKind.GREATER_THAN,
    TokenKind.IS_SMALLER_OR_EQUAL,
    TokenKind.IS_GREATER_OR_EQUAL,
    TokenKind.SPACESHIP,
    TokenKind.COALESCE,
})

OPERATOR_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.MINUS,
    TokenKind.PLUS,
    TokenKind.MULTIPLY,
    TokenKind.DIVIDE,
    TokenKind.MODULUS,
    TokenKind.POW,
    TokenKind.SL,
    TokenKind.SR,
    TokenKind.BITWISE_AND,
    TokenKind.BITWISE_OR,
    TokenKind.BITWISE_XOR,
    TokenKind.STRING_CONCAT,
    TokenKind.BOOLEAN_AND,
    TokenKind.BOOLEAN_OR,
    TokenKind.LOGICAL_AND,
    TokenKind.LOGICAL_OR,
    TokenKind.LOGICAL_XOR,
    TokenKind.INSTANCEOF,
})

ASSIGNMENT_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.EQUAL,
    TokenKind.PLUS_EQUAL,
    TokenKind.MINUS_EQUAL,
    TokenKind.MUL_EQUAL,
    TokenKind.DIV_EQUAL,
    TokenKind.MOD_EQUAL,
    TokenKind.POW_EQUAL,
    TokenKind.CONCAT_EQUAL,
    TokenKind.AND_EQUAL,
    TokenKind.OR_EQUAL,
    TokenKind.XOR_EQUAL,
    TokenKind.SL_EQUAL,
    TokenKind.SR_EQUAL,
    TokenKind.COALESCE_EQUAL,
    TokenKind.DOUBLE_ARROW,
})

OPENING_BRACKETS: dict[TokenKind, TokenKind] = {
    TokenKind.OPEN_PARENTHESIS: TokenKind.CLOSE_PARENTHESIS,
    TokenKind.OPEN_SQUARE_BRACKET: TokenKind.CLOSE_SQUARE_BRACKET,
    TokenKind.OPEN_CURLY_BRACKET: TokenKind.CLOSE_CURLY_BRACKET,
}

# Keywords that may own the parenthesis that follows them.
PARENTHESIS_OWNER_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.FUNCTION,
    TokenKind.CLOSURE,
    TokenKind.FN,
    TokenKind.IF,
    TokenKind.ELSEIF,
    TokenKind.WHILE,
    TokenKind.FOR,
    TokenKind.FOREACH,
    TokenKind.SWITCH,
    TokenKind.CATCH,
    TokenKind.ARRAY,
    TokenKind.LIST,
})

FUNCTION_DECLARATION_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.FUNCTION,
    TokenKind.CLOSURE,
})


class OperatorCategory(Enum):
    """How the operator spacing rule treats an occurrence."""

    COMPARISON = "comparison"
    GENERAL = "general"
    ASSIGNMENT = "assignment"
    NOT = "not"
    BITWISE_AND = "bitwise_and"
    MINUS = "minus"

    @classmethod
    def of(cls, kind: TokenKind) -> "OperatorCategory | None":
        """Classify a kind; None when the kind is not an operator."""
        if kind is TokenKind.BITWISE_AND:
            return cls.BITWISE_AND
        if kind is TokenKind.MINUS:
            return cls.MINUS
        if kind is TokenKind.BOOLEAN_NOT:
            return cls.NOT
        if kind in ASSIGNMENT_KINDS:
            return cls.ASSIGNMENT
        if kind in COMPARISON_KINDS:
            return cls.COMPARISON
        if kind in OPERATOR_KINDS:
            return cls.GENERAL
        return None


@dataclass(frozen=True)
class Token:
    """A single lexed token. Identity is its index in the owning stream."""

    kind: TokenKind
    content: str
    line: int = 1
    column: int = 1

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE
