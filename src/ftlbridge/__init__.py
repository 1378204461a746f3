"""FTLBridge - Fluent (FTL) translations as a key-to-function lookup.

Builds one Fluent bundle per locale from inline FTL source and exposes every
message key as a callable that resolves the locale at call time through a
fallback chain (current locale, then default locales).

Public API:
    create - Build Translations from a {locale: ftl_source} mapping
    ftl - Build FTL source from indented inline text
    clean - Strip bidi isolation marks from a formatted string
    LocaleConfig - Current locale and default locales
    default_config - Process-wide LocaleConfig used when none is given
    Translations - Mapping of message key to MessageFormatter
    MessageFormatter - Callable bound to a single message key
    TranslationStore - Parsed messages of a single locale
    ParseIssue - Syntax error recorded while building a store
    FallbackInfo - Fallback event passed to on_fallback callbacks

Exceptions:
    FTLBridgeError - Base exception class
    UnresolvedMessageError - No locale in the fallback chain has the message

Python 3.13+. External dependency: ftllexengine (with Babel).
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import LocaleConfig, default_config
from .errors import FTLBridgeError, UnresolvedMessageError
from .resolver import FallbackInfo, MessageFormatter, Translations, create
from .store import ParseIssue, TranslationStore
from .text import clean, ftl

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("ftlbridge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FTLBridgeError",
    "FallbackInfo",
    "LocaleConfig",
    "MessageFormatter",
    "ParseIssue",
    "TranslationStore",
    "Translations",
    "UnresolvedMessageError",
    "__version__",
    "clean",
    "create",
    "default_config",
    "ftl",
]
