"""Grammar for ``SELECT <col1>, <col2>, ... FROM <table>`` queries.

Rules::

    select_query -> SELECT columns FROM table <end of line>
    columns      -> column | column , columns
    column       -> <variable>
    table        -> <variable>

Each rule returns ``True`` on success; on failure it returns ``False`` and
leaves the parser as it found it.
"""

import logging

from .codes import Operator, Special, TokenType

_log = logging.getLogger(__name__)


def _keyword(parser, word):
    """Consume one variable token spelled ``word`` in any letter case."""
    return (
        parser.forward() == TokenType.VARIABLE
        and parser.stack.peek().text.casefold() == word.casefold()
    )


def parse_select_query(parser):
    """Parse a whole select query ending at an end-of-line token.

    On success the end-of-line token is given back to the input.
    """
    checkpoint = parser.checkpoint()
    if not _keyword(parser, "SELECT") or not parse_columns(parser):
        parser.restore(checkpoint)
        return False
    if not _keyword(parser, "FROM"):
        parser.restore(checkpoint)
        return False
    parser.forward()
    if not parse_table(parser) or parser.forward() != Special.END_OF_LINE:
        parser.restore(checkpoint)
        return False
    parser.rewind(1)
    _log.debug("select query accepted")
    return True


def parse_columns(parser):
    """Parse a comma-separated list of one or more columns."""
    if not parse_column(parser):
        return False
    while True:
        checkpoint = parser.checkpoint()
        if parser.forward() == Operator.COMMA and parse_column(parser):
            continue
        parser.restore(checkpoint)
        return True


def parse_column(parser):
    """Parse a single column name."""
    checkpoint = parser.checkpoint()
    if parser.forward() != TokenType.VARIABLE:
        parser.restore(checkpoint)
        return False
    _log.debug("column %s", parser.stack.peek().text)
    return True


def parse_table(parser):
    """Accept the table name already read by the caller; consumes nothing."""
    return True