"""Quote-aware splitting of a directive body into tokens."""
from __future__ import annotations


def tokenize(body: str) -> list[str]:
    """Split a directive body on whitespace, keeping double-quoted runs intact.

    Quotes stay in the token text so callers can tell ``"AND"`` (a literal)
    from ``AND`` (a bare word).  A backslash-escaped quote does not end a
    quoted run, and an unterminated quote runs to the end of the input.

    Args:
        body: Text between the ``/**`` and ``**/`` delimiters.

    Returns:
        Ordered list of non-empty tokens.

    Example::

        >>> tokenize('multi "(a = ? OR b = ?)"  "AND" .Names')
        ['multi', '"(a = ? OR b = ?)"', '"AND"', '.Names']
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for i, ch in enumerate(body):
        if ch == '"' and (i == 0 or body[i - 1] != "\\"):
            in_quotes = not in_quotes
            current.append(ch)
        elif ch.isspace() and not in_quotes:
            if current:
                tokens.append("".join(current).strip())
                current = []
        else:
            current.append(ch)

    tail = "".join(current).strip()
    if tail:
        tokens.append(tail)
    return tokens
