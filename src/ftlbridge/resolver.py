"""Key-to-function lookup with locale fallback.

create() builds one TranslationStore per locale and returns a Translations
table holding one MessageFormatter per distinct message key. Formatters
resolve their locale when called, walking the fallback chain of a
LocaleConfig:

    (current_locale,) + default_locales

and formatting with the first store that has the key. Bidi isolation marks
are removed from the result.

Example:
    >>> config = LocaleConfig(default_locales=["en"])
    >>> t = create(
    ...     {
    ...         "en": "greeting = Hello, { $name }!",
    ...         "fr": "greeting = Bonjour, { $name }!",
    ...     },
    ...     config=config,
    ... )
    >>> t.greeting({"name": "Ana"})
    'Hello, Ana!'
    >>> config.current_locale = "fr"
    >>> t.greeting(name="Ana")
    'Bonjour, Ana!'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from ftllexengine import FluentValue, FrozenFluentError

from ftlbridge.config import LocaleConfig, default_config
from ftlbridge.errors import UnresolvedMessageError
from ftlbridge.store import ParseIssue, TranslationStore
from ftlbridge.text import clean
from ftlbridge.types import FTLSource, LocaleCode, MessageId, Props

__all__ = ["FallbackInfo", "MessageFormatter", "Translations", "create"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when a message resolves from a
    locale other than the first one in the fallback chain.

    Attributes:
        requested_locale: The first locale in the chain
        resolved_locale: The locale that actually contained the message
        message_id: The message identifier that was resolved
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    message_id: MessageId


class MessageFormatter:
    """Formatting function bound to one message key.

    Calling it formats the message in the first locale of the fallback chain
    that provides the key. Variables may be given as a mapping, as keyword
    arguments, or both (keywords win).
    """

    __slots__ = ("_message_id", "_translations")

    def __init__(self, translations: Translations, message_id: MessageId) -> None:
        self._translations = translations
        self._message_id = message_id

    @property
    def message_id(self) -> MessageId:
        return self._message_id

    def __call__(self, props: Props | None = None, /, **kwargs: FluentValue) -> str:
        """Format the bound message.

        Raises:
            UnresolvedMessageError: If no locale in the fallback chain has the message
        """
        if kwargs:
            props = {**props, **kwargs} if props else kwargs
        value, _errors = self._translations.format_value(self._message_id, props)
        return value

    def __repr__(self) -> str:
        return f"MessageFormatter({self._message_id!r})"


class Translations(Mapping[MessageId, MessageFormatter]):
    """Read-only table of message key to bound formatter.

    The key set is the union of message keys across all locales at creation
    time. A key defined in several locales maps to a single formatter.
    Identifier-like keys are also available as attributes, unless the name
    is already taken by a Translations method or property.

    Locale resolution happens on every call, so changing the configuration's
    current locale affects subsequent calls without rebuilding the table.
    """

    __slots__ = ("_config", "_formatters", "_on_fallback", "_stores")

    def __init__(
        self,
        stores: Mapping[LocaleCode, TranslationStore],
        config: LocaleConfig,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        self._stores: dict[LocaleCode, TranslationStore] = dict(stores)
        self._config = config
        self._on_fallback = on_fallback

        self._formatters: dict[MessageId, MessageFormatter] = {}
        for store in self._stores.values():
            for message_id in store.message_ids:
                if message_id not in self._formatters:
                    self._formatters[message_id] = MessageFormatter(self, message_id)
                    logger.debug("Bound formatter for '%s'", message_id)

    # Mapping protocol

    def __getitem__(self, message_id: MessageId) -> MessageFormatter:
        return self._formatters[message_id]

    def __iter__(self) -> Iterator[MessageId]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __getattr__(self, name: str) -> MessageFormatter:
        # Only called when regular lookup fails; private names never map to messages.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._formatters[name]
        except KeyError:
            msg = f"{type(self).__name__!r} object has no message {name!r}"
            raise AttributeError(msg) from None

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(key for key in self._formatters if key.isidentifier())
        return sorted(names)

    def __repr__(self) -> str:
        return (
            f"Translations(locales={self.locales!r}, messages={len(self._formatters)})"
        )

    # Introspection

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Get locales that have a store, in creation order."""
        return tuple(self._stores)

    @property
    def config(self) -> LocaleConfig:
        """Get the locale configuration consulted on every call."""
        return self._config

    @property
    def parse_issues(self) -> tuple[ParseIssue, ...]:
        """Get syntax errors from all locales, in creation order."""
        return tuple(issue for store in self._stores.values() for issue in store.issues)

    def get_store(self, locale: LocaleCode) -> TranslationStore | None:
        """Get the store for a locale, or None if no translations were given for it."""
        return self._stores.get(locale)

    # Resolution

    def resolve_locale(self, message_id: MessageId) -> LocaleCode | None:
        """Find the locale that would serve a message right now.

        Args:
            message_id: Message identifier

        Returns:
            First locale in the fallback chain whose store has the message,
            or None if there is none
        """
        return self._resolve(message_id, self._config.fallback_chain())

    def _resolve(
        self, message_id: MessageId, chain: tuple[LocaleCode, ...]
    ) -> LocaleCode | None:
        for locale in chain:
            store = self._stores.get(locale)
            if store is not None and store.has(message_id):
                return locale
        return None

    def format_value(
        self, message_id: MessageId, props: Props | None = None
    ) -> tuple[str, tuple[FrozenFluentError, ...]]:
        """Format a message through the fallback chain.

        Formatting errors are logged at WARNING level and returned alongside
        the value; they never raise.

        Args:
            message_id: Message identifier
            props: Variables for interpolation

        Returns:
            Tuple of (cleaned_value, errors)

        Raises:
            UnresolvedMessageError: If no locale in the fallback chain has the message
        """
        chain = self._config.fallback_chain()
        locale = self._resolve(message_id, chain)
        if locale is None:
            logger.warning("Message '%s' not found in locales %s", message_id, chain)
            raise UnresolvedMessageError(message_id, chain)

        if locale != chain[0]:
            logger.debug(
                "Message '%s' resolved from fallback locale %s (requested %s)",
                message_id,
                locale,
                chain[0],
            )
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        requested_locale=chain[0],
                        resolved_locale=locale,
                        message_id=message_id,
                    )
                )

        value, errors = self._stores[locale].format(message_id, props)
        for error in errors:
            logger.warning("Formatting error for '%s' in %s: %s", message_id, locale, error)
        return clean(value), errors

    def format(
        self, message_id: MessageId, props: Props | None = None, /, **kwargs: FluentValue
    ) -> str:
        """Format a message by key; equivalent to ``self[message_id](props, **kwargs)``.

        Raises:
            UnresolvedMessageError: If no locale in the fallback chain has the message
        """
        if kwargs:
            props = {**props, **kwargs} if props else kwargs
        value, _errors = self.format_value(message_id, props)
        return value


def create(
    translations: Mapping[LocaleCode, FTLSource],
    *,
    config: LocaleConfig | None = None,
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> Translations:
    """Build translations from per-locale FTL source.

    Args:
        translations: Mapping of locale code to FTL source text
        config: Locale configuration consulted on every call
               (default: the process-wide ``default_config``)
        on_fallback: Optional callback invoked when a message resolves from a
                    locale other than the first in the fallback chain

    Returns:
        Translations mapping every message key to its formatter

    Raises:
        ValueError: If a locale code is rejected by the formatting engine
    """
    stores = {locale: TranslationStore(locale, source) for locale, source in translations.items()}
    result = Translations(
        stores,
        config if config is not None else default_config,
        on_fallback=on_fallback,
    )
    logger.info(
        "Created translations: %d locales, %d messages", len(result.locales), len(result)
    )
    return result
