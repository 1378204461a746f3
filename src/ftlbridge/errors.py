"""FTLBridge exception hierarchy.

Parse and formatting problems reported by the engine are never raised; they
are logged and returned as data. Exceptions here cover failures the caller
has to act on.

Python 3.13+. Zero external dependencies.
"""

from ftlbridge.types import LocaleCode, MessageId

__all__ = [
    "FTLBridgeError",
    "UnresolvedMessageError",
]


class FTLBridgeError(Exception):
    """Base exception for all FTLBridge errors."""


class UnresolvedMessageError(FTLBridgeError, LookupError):
    """No locale in the fallback chain provides the requested message.

    Raised at call time, so it depends on the locale configuration in effect
    when the formatter is invoked, not when the translations were created.

    Attributes:
        message_id: The message that could not be resolved
        locales: The fallback chain that was searched, in order
    """

    def __init__(self, message_id: MessageId, locales: tuple[LocaleCode, ...]) -> None:
        self.message_id = message_id
        self.locales = locales
        super().__init__(
            f"Message '{message_id}' not found in any locale of fallback chain {locales!r}"
        )
