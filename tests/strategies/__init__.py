"""Hypothesis strategies for FTLBridge property-based testing.

Usage:
    from tests.strategies import message_ids, translation_sources
"""

from .translations import (
    locale_codes,
    message_ids,
    plain_texts,
    translation_sources,
)

__all__ = [
    "locale_codes",
    "message_ids",
    "plain_texts",
    "translation_sources",
]
