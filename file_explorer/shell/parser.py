"""
Tokenizer for shell input lines.
"""

import shlex


def _tokenize(line: str) -> list[str]:
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.escape = ""
    lexer.commenters = ""
    return [token for token in lexer if token]


def split_args(line: str) -> list[str]:
    """
    Split a command line into non-empty tokens.

    Double-quoted segments form a single token with the quotes removed. An
    unterminated quote runs to the end of the line. A line that yields no
    tokens this way falls back to plain whitespace splitting.
    """
    if not line or not line.strip():
        return []

    try:
        tokens = _tokenize(line)
    except ValueError:
        # unterminated quote
        tokens = _tokenize(line + '"')

    if not tokens:
        tokens = line.split()
    return tokens
