"""Backtracking recursive-descent parsers over a checkpointed token stack."""

__version__ = "0.1.0"
__all__ = ["codes", "console", "stack", "parser", "math_grammar", "sql_select"]