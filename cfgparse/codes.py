"""Numeric token codes shared by the lexer, the parser and the grammars."""

from enum import IntEnum

# Each family of codes follows the previous one without overlapping it.
_TYPES_BEGIN = -1
_TYPES_END = 6
_OPERATORS_BEGIN = _TYPES_END + 1
_OPERATORS_END = 46
_FUNCTIONS_BEGIN = _OPERATORS_END + 1


class TokenType(IntEnum):
    """Codes of value-carrying tokens."""

    # basic types
    BOOLEAN = _TYPES_BEGIN + 1
    INTEGERS_COLLECTION = _TYPES_BEGIN + 2
    REAL_NUMBERS_COLLECTION = _TYPES_BEGIN + 3
    # complex types
    STRING = _TYPES_BEGIN + 4
    VARIABLE = _TYPES_BEGIN + 5
    # special types
    IPv4 = _TYPES_BEGIN + 6


class Operator(IntEnum):
    """Codes of operator and punctuation tokens."""

    # arithmetic
    PLUS = _OPERATORS_BEGIN + 1
    MINUS = _OPERATORS_BEGIN + 2
    TIMES = _OPERATORS_BEGIN + 3
    OBELUS = _OPERATORS_BEGIN + 4
    MODULO = _OPERATORS_BEGIN + 5
    INCREMENT = _OPERATORS_BEGIN + 6
    DECREMENT = _OPERATORS_BEGIN + 7
    # relational
    EQUAL_TO = _OPERATORS_BEGIN + 8
    NOT_EQUAL_TO = _OPERATORS_BEGIN + 9
    LESS_THAN = _OPERATORS_BEGIN + 10
    GREATER_THAN = _OPERATORS_BEGIN + 11
    LESS_THAN_OR_EQUAL_TO = _OPERATORS_BEGIN + 12
    GREATER_THAN_OR_EQUAL_TO = _OPERATORS_BEGIN + 13
    # logical
    LOGICAL_AND = _OPERATORS_BEGIN + 14
    LOGICAL_OR = _OPERATORS_BEGIN + 15
    LOGICAL_NOT = _OPERATORS_BEGIN + 16
    # bitwise
    AND = _OPERATORS_BEGIN + 17
    OR = _OPERATORS_BEGIN + 18
    XOR = _OPERATORS_BEGIN + 19
    BIT_INVERSE = _OPERATORS_BEGIN + 20
    LEFTSHIFT = _OPERATORS_BEGIN + 21
    RIGHTSHIFT = _OPERATORS_BEGIN + 22
    # assignment
    ASSIGN = _OPERATORS_BEGIN + 23
    ADD_AND_ASSIGN = _OPERATORS_BEGIN + 24
    SUBSTRACT_AND_ASSIGN = _OPERATORS_BEGIN + 25
    MULTIPLY_AND_ASSIGN = _OPERATORS_BEGIN + 26
    DIVIDE_AND_ASSIGN = _OPERATORS_BEGIN + 27
    MODULO_AND_ASSIGN = _OPERATORS_BEGIN + 28
    BITWISE_AND_AND_ASSIGN = _OPERATORS_BEGIN + 29
    BITWISE_OR_AND_ASSIGN = _OPERATORS_BEGIN + 30
    BITWISE_XOR_AND_ASSIGN = _OPERATORS_BEGIN + 31
    BITWISE_LEFTSHIFT_AND_ASSIGN = _OPERATORS_BEGIN + 32
    BITWISE_RIGHTSHIFT_AND_ASSIGN = _OPERATORS_BEGIN + 33
    # other
    OPEN_PARENTHESES = _OPERATORS_BEGIN + 34
    CLOSED_PARENTHESES = _OPERATORS_BEGIN + 35
    OPEN_BRACKET = _OPERATORS_BEGIN + 36
    CLOSED_BRACKET = _OPERATORS_BEGIN + 37
    COMMA = _OPERATORS_BEGIN + 38


class Function(IntEnum):
    """Codes of built-in function names."""

    MIN = _FUNCTIONS_BEGIN + 1
    MAX = _FUNCTIONS_BEGIN + 2
    ROOT = _FUNCTIONS_BEGIN + 3
    POW = _FUNCTIONS_BEGIN + 4
    SIN = _FUNCTIONS_BEGIN + 5
    COS = _FUNCTIONS_BEGIN + 6
    TAN = _FUNCTIONS_BEGIN + 7


class Special(IntEnum):
    """Out-of-band codes produced by the lexer."""

    END_OF_LINE = -1_000_000_000
    NOT_IN_A_DICTIONARY = -100_000_000
    EXIT_REQUESTED = -10_000_000
    WHITESPACE = -1_000_000