"""Locale configuration consulted by every bound formatter.

A LocaleConfig holds the current locale and the ordered default locales.
Formatters read it on every call, so assigning a new current locale takes
effect immediately without rebuilding translations.

Translations created without an explicit config share the module-level
``default_config`` instance.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from ftlbridge.constants import DEFAULT_LOCALES
from ftlbridge.types import LocaleCode

__all__ = ["LocaleConfig", "default_config"]

logger = logging.getLogger(__name__)


def _check_locale(locale: object) -> LocaleCode:
    if not isinstance(locale, str):
        msg = f"Locale code must be a string, got {type(locale).__name__}"
        raise TypeError(msg)
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    return locale


class LocaleConfig:
    """Current locale plus ordered default locales.

    Thread Safety:
        Reads and writes are guarded by an internal lock. fallback_chain()
        always observes a consistent pair of values.

    Example:
        >>> config = LocaleConfig(default_locales=["en"])
        >>> config.fallback_chain()
        ('en',)
        >>> config.current_locale = "fr"
        >>> config.fallback_chain()
        ('fr', 'en')
    """

    __slots__ = ("_current_locale", "_default_locales", "_lock")

    def __init__(
        self,
        current_locale: LocaleCode | None = None,
        default_locales: Iterable[LocaleCode] = DEFAULT_LOCALES,
    ) -> None:
        """Initialize configuration.

        Args:
            current_locale: Preferred locale, or None to use defaults only
            default_locales: Locales tried after the current one, in order

        Raises:
            TypeError: If a locale is not a string, or default_locales is a str
            ValueError: If a locale code is empty
        """
        self._lock = threading.Lock()
        self._current_locale: LocaleCode | None = (
            None if current_locale is None else _check_locale(current_locale)
        )
        self._default_locales: tuple[LocaleCode, ...] = self._check_defaults(default_locales)

    @staticmethod
    def _check_defaults(locales: Iterable[LocaleCode]) -> tuple[LocaleCode, ...]:
        # A bare "en" would otherwise iterate as ("e", "n").
        if isinstance(locales, str):
            msg = "default_locales must be an iterable of locale codes, not a string"
            raise TypeError(msg)
        return tuple(_check_locale(locale) for locale in locales)

    @property
    def current_locale(self) -> LocaleCode | None:
        """Get the preferred locale (None when unset)."""
        with self._lock:
            return self._current_locale

    @current_locale.setter
    def current_locale(self, locale: LocaleCode | None) -> None:
        checked = None if locale is None else _check_locale(locale)
        with self._lock:
            self._current_locale = checked
        logger.debug("Current locale set to %s", checked)

    @property
    def default_locales(self) -> tuple[LocaleCode, ...]:
        """Get the default locales in fallback order."""
        with self._lock:
            return self._default_locales

    @default_locales.setter
    def default_locales(self, locales: Iterable[LocaleCode]) -> None:
        checked = self._check_defaults(locales)
        with self._lock:
            self._default_locales = checked
        logger.debug("Default locales set to %s", checked)

    def fallback_chain(self) -> tuple[LocaleCode, ...]:
        """Get locales to try, in order.

        The current locale (if set) comes first, followed by the default
        locales. Duplicates are dropped, keeping the first occurrence.

        Returns:
            Tuple of locale codes in priority order
        """
        with self._lock:
            current = self._current_locale
            defaults = self._default_locales
        head = () if current is None else (current,)
        # dict.fromkeys() removes duplicates while maintaining insertion order
        return tuple(dict.fromkeys(head + defaults))

    def __repr__(self) -> str:
        return (
            f"LocaleConfig(current_locale={self.current_locale!r}, "
            f"default_locales={self.default_locales!r})"
        )


default_config = LocaleConfig()
"""Process-wide configuration used by translations created without one."""
