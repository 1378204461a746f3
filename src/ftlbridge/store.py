"""TranslationStore - Parsed messages for a single locale.

Wraps one ftllexengine FluentBundle. The store is built once from FTL source
and never modified afterwards. Syntax errors in the source are recorded as
ParseIssue entries, and so are repeated message or term definitions; they
only reduce the set of messages the store can serve.

Python 3.13+. External dependency: ftllexengine (Fluent parser and runtime).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ftllexengine import FluentBundle, FrozenFluentError, parse_ftl, serialize_ftl
from ftllexengine.syntax import Entry, Junk, Message, Term

from ftlbridge.constants import LOG_TRUNCATE_WARNING
from ftlbridge.types import FTLSource, LocaleCode, MessageId, Props

__all__ = ["ParseIssue", "TranslationStore"]

logger = logging.getLogger(__name__)


def _entry_source(source: FTLSource, entry: Message | Term, fallback: str) -> str:
    if entry.span is None:
        return fallback
    return source[entry.span.start : entry.span.end]


@dataclass(frozen=True, slots=True)
class ParseIssue:
    """Unparseable FTL content found while building a store.

    Attributes:
        locale: Locale whose source contained the error
        content: The unparseable or duplicate source text
        messages: Annotations describing the problem
    """

    locale: LocaleCode
    content: str
    messages: tuple[str, ...] = ()

    def __str__(self) -> str:
        detail = "; ".join(self.messages) or "syntax error"
        return f"[{self.locale}] {detail}: {self.content[:LOG_TRUNCATE_WARNING]!r}"


class TranslationStore:
    """Messages parsed from the FTL source of one locale.

    Examples:
        >>> store = TranslationStore("en", "greeting = Hello, { $name }!")
        >>> store.has("greeting")
        True
        >>> store.format("greeting", {"name": "Ana"})
        ('Hello, \\u2068Ana\\u2069!', ())
    """

    __slots__ = ("_bundle", "_issues", "_locale", "_message_ids")

    def __init__(self, locale: LocaleCode, source: FTLSource) -> None:
        """Parse source and build the store.

        Syntax errors become ParseIssue entries. The engine logs each of them
        at WARNING level itself; the store only adds a DEBUG record.

        A message or term defined more than once keeps its first definition.
        Later definitions are dropped, recorded as ParseIssue entries and
        logged at WARNING level.

        Args:
            locale: Locale code for the messages
            source: FTL source text

        Raises:
            ValueError: If the engine rejects the locale code format
            FrozenFluentError: On a critical parse failure (e.g. source too large)
        """
        self._locale = locale
        self._bundle = FluentBundle(locale, use_isolating=True, strict=False)

        resource = parse_ftl(source)
        issues: list[ParseIssue] = []
        kept: list[Entry] = []
        seen: set[str] = set()
        for entry in resource.entries:
            match entry:
                case Junk():
                    issues.append(
                        ParseIssue(
                            locale=locale,
                            content=entry.content,
                            messages=tuple(a.message for a in entry.annotations),
                        )
                    )
                    # repr() escapes control characters in untrusted source
                    logger.debug(
                        "Syntax error in translations for %s: %s",
                        locale,
                        repr(entry.content[:LOG_TRUNCATE_WARNING]),
                    )
                    kept.append(entry)
                case Message() | Term():
                    entry_id = ("-" if isinstance(entry, Term) else "") + entry.id.name
                    if entry_id in seen:
                        issues.append(
                            ParseIssue(
                                locale=locale,
                                content=_entry_source(source, entry, entry_id),
                                messages=(f"Duplicate definition of '{entry_id}'",),
                            )
                        )
                        logger.warning(
                            "Duplicate definition of '%s' in translations for %s; "
                            "keeping the first one",
                            entry_id,
                            locale,
                        )
                        continue
                    seen.add(entry_id)
                    kept.append(entry)
                case _:
                    kept.append(entry)

        if len(kept) != len(resource.entries):
            # The engine rejects a resource with repeated IDs as a whole.
            source = serialize_ftl(replace(resource, entries=tuple(kept)))
        self._bundle.add_resource(source, source_path=f"<translations:{locale}>")

        self._issues = tuple(issues)
        self._message_ids = tuple(self._bundle.get_message_ids())

        logger.info(
            "Built store for %s: %d messages, %d issues",
            locale,
            len(self._message_ids),
            len(self._issues),
        )

    @property
    def locale(self) -> LocaleCode:
        """Get the locale code of this store."""
        return self._locale

    @property
    def message_ids(self) -> tuple[MessageId, ...]:
        """Get message identifiers in source order."""
        return self._message_ids

    @property
    def issues(self) -> tuple[ParseIssue, ...]:
        """Get syntax errors and duplicate definitions found in the source."""
        return self._issues

    def has(self, message_id: MessageId) -> bool:
        """Check if the store contains a message."""
        return self._bundle.has_message(message_id)

    def __contains__(self, message_id: object) -> bool:
        return isinstance(message_id, str) and self.has(message_id)

    def format(
        self, message_id: MessageId, props: Props | None = None
    ) -> tuple[str, tuple[FrozenFluentError, ...]]:
        """Format a message with the engine.

        The value still carries the engine's bidi isolation marks.

        Args:
            message_id: Message identifier
            props: Variables for interpolation

        Returns:
            Tuple of (formatted_string, errors). Errors are non-fatal; the
            string is the engine's best-effort rendering.
        """
        value, errors = self._bundle.format_pattern(message_id, props)
        return value, tuple(errors)

    def __repr__(self) -> str:
        return f"TranslationStore(locale={self._locale!r}, messages={len(self._message_ids)})"
