"""Backtracking recursive-descent grammars for arithmetic, relational and
logical expressions.

Grammar, after removal of left recursion::

    E' -> S' E''
    E'' -> + S' E'' | - S' E'' | (empty)
    S' -> W' S''
    S'' -> * W' S'' | / W' S'' | (empty)
    W' -> ( E' ) | <integer> | <double> | <variable>

    U -> E' I E'       I -> == | != | < | > | <= | >=
    P -> E' L E'       L -> <and> | <or> | <not>

Every rule returns ``True`` on success. On failure it returns ``False`` and
leaves the parser exactly as it found it.
"""

from .codes import Operator, TokenType

_OPERANDS = frozenset(
    {
        TokenType.INTEGERS_COLLECTION,
        TokenType.REAL_NUMBERS_COLLECTION,
        TokenType.VARIABLE,
    }
)
_ADDITIVE = frozenset({Operator.PLUS, Operator.MINUS})
_MULTIPLICATIVE = frozenset({Operator.TIMES, Operator.OBELUS})
_RELATIONAL = frozenset(
    {
        Operator.EQUAL_TO,
        Operator.NOT_EQUAL_TO,
        Operator.LESS_THAN,
        Operator.GREATER_THAN,
        Operator.LESS_THAN_OR_EQUAL_TO,
        Operator.GREATER_THAN_OR_EQUAL_TO,
    }
)
_LOGICAL = frozenset(
    {Operator.LOGICAL_AND, Operator.LOGICAL_OR, Operator.LOGICAL_NOT}
)


def _sequence(parser, *rules):
    """Apply ``rules`` in order; undo everything if any of them fails."""
    checkpoint = parser.checkpoint()
    if all(rule(parser) for rule in rules):
        return True
    parser.restore(checkpoint)
    return False


def _single_token(parser, accepted):
    """Consume one token whose code is in ``accepted``."""
    checkpoint = parser.checkpoint()
    if parser.forward() in accepted:
        return True
    parser.restore(checkpoint)
    return False


def _repeat(parser, operators, operand):
    """Consume ``(operator operand)*``; always succeeds."""
    while True:
        checkpoint = parser.checkpoint()
        if parser.forward() in operators and operand(parser):
            continue
        parser.restore(checkpoint)
        return True


def _factor(parser):
    checkpoint = parser.checkpoint()
    if (
        parser.forward() == Operator.OPEN_PARENTHESES
        and parse_expression(parser)
        and parser.forward() == Operator.CLOSED_PARENTHESES
    ):
        return True
    parser.restore(checkpoint)
    return _single_token(parser, _OPERANDS)


def _term(parser):
    return _sequence(
        parser, _factor, lambda p: _repeat(p, _MULTIPLICATIVE, _factor)
    )


def parse_expression(parser):
    """Parse an arithmetic expression (``E'``)."""
    return _sequence(parser, _term, lambda p: _repeat(p, _ADDITIVE, _term))


def parse_inequality(parser):
    """Parse ``expression relational-operator expression`` (``U``)."""
    return _sequence(
        parser,
        parse_expression,
        lambda p: _single_token(p, _RELATIONAL),
        parse_expression,
    )


def parse_logical(parser):
    """Parse ``expression logical-operator expression`` (``P``)."""
    return _sequence(
        parser,
        parse_expression,
        lambda p: _single_token(p, _LOGICAL),
        parse_expression,
    )