"""Type aliases for the translation domain.

Provides semantic type aliases used throughout the package and by user code
when annotating call sites of create() and the bound formatters.

Python 3.13+.
"""

from collections.abc import Mapping

from ftllexengine import FluentValue

__all__ = [
    "FTLSource",
    "LocaleCode",
    "MessageId",
    "Props",
]

type MessageId = str
"""Identifier for a Fluent message (e.g., 'greeting', 'cart-empty')."""

type LocaleCode = str
"""Locale code (e.g., 'en', 'fr', 'pt-BR'). Compared by equality only."""

type FTLSource = str
"""Raw FTL source text as a Python string."""

type Props = Mapping[str, FluentValue]
"""Variables passed to a message for interpolation."""
