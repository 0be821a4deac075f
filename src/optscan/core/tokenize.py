# topmark:header:start
#
#   project      : OptScan
#   file         : tokenize.py
#   file_relpath : src/optscan/core/tokenize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shell-like splitting of a text buffer into argument tokens."""

from __future__ import annotations

import shlex


def split_arguments(text: str) -> list[str]:
    """Split ``text`` into tokens the way a POSIX shell splits a command line.

    Whitespace separates tokens; single or double quotes group words into one
    token (quotes are removed); a backslash escapes the next character outside
    single quotes. ``#`` has no special meaning.

    Raises:
        ValueError: If a quote is not closed or the text ends with an escape.
    """
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    return list(lexer)
