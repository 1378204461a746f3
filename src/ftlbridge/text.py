"""String helpers around FTL source and formatted output.

clean() strips the bidi isolation marks the engine inserts around every
substituted value. ftl() builds FTL source from indented inline text.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Sequence

from ftlbridge.constants import BIDI_ISOLATION_MARKS

__all__ = ["clean", "ftl"]

_BIDI_TABLE: dict[int, None] = dict.fromkeys(map(ord, BIDI_ISOLATION_MARKS))

# \s also matches newlines, so blank lines before indented content collapse too.
_LEADING_WHITESPACE = re.compile(r"^\s*", re.MULTILINE)
_PIPED_CONTINUATION = re.compile(r"\s*\n\|\s*")


def clean(value: str) -> str:
    """Remove every FSI/PDI bidi isolation mark from a formatted string.

    Example:
        >>> clean("Hello, \\u2068Ana\\u2069!")
        'Hello, Ana!'
    """
    return value.translate(_BIDI_TABLE)


def ftl(strings: str | Sequence[str], /, *values: object) -> str:
    """Build FTL source from literal segments and interpolated values.

    Segments and values are interleaved (``strings[0] + str(values[0]) +
    strings[1] + ...``). Leading whitespace is then removed from every line,
    so FTL can be written at any indentation inside Python code. Finally,
    lines that start with ``|`` are joined to the previous line with a
    single space, allowing long messages to be wrapped in source.

    All indentation is removed, including the indentation FTL gives to
    select variants and multiline continuation lines. Messages that need
    indented lines cannot be written with ftl(); pass them as plain strings.

    Args:
        strings: Literal segments, or a single string [positional-only]
        *values: Values placed between consecutive segments

    Returns:
        FTL source text

    Example:
        >>> ftl('''
        ...     welcome = Welcome to { $app },
        ...         | please sign in.
        ...     logout = Sign out
        ... ''')
        'welcome = Welcome to { $app }, please sign in.\\nlogout = Sign out\\n'
        >>> ftl(["brand = ", "\\n"], "Acme")
        'brand = Acme\\n'
    """
    segments = (strings,) if isinstance(strings, str) else strings
    joined = "".join(
        segment + (str(values[i]) if i < len(values) else "")
        for i, segment in enumerate(segments)
    )
    stripped = _LEADING_WHITESPACE.sub("", joined)
    return _PIPED_CONTINUATION.sub(" ", stripped)
