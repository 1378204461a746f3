"""Shared constants for FTLBridge.

Constants are grouped by domain:
- Locale defaults: Fallback chain used when no configuration is supplied
- Bidi marks: Characters removed from every formatted value
- Logging limits: Truncation of source snippets in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALES",
    # Bidi marks
    "FSI",
    "PDI",
    "BIDI_ISOLATION_MARKS",
    # Logging limits
    "LOG_TRUNCATE_WARNING",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Fallback locales consulted after the current locale, in order.
DEFAULT_LOCALES: tuple[str, ...] = ("en",)

# ============================================================================
# BIDI MARKS
# ============================================================================
#
# The formatting engine wraps every substituted value in FSI ... PDI
# (Unicode TR9 isolates). Many text renderers do not support them, and they
# make an empty substitution look like a two-character string, so they are
# stripped from formatted output.

FSI: str = "\u2068"  # FIRST STRONG ISOLATE
PDI: str = "\u2069"  # POP DIRECTIONAL ISOLATE

BIDI_ISOLATION_MARKS: tuple[str, ...] = (FSI, PDI)

# ============================================================================
# LOGGING LIMITS
# ============================================================================

# Maximum characters of FTL source echoed in a warning record.
LOG_TRUNCATE_WARNING: int = 100
