"""Tests for the ftlbridge package entry point.

Covers __all__ integrity, error hierarchy, and the fallback version when
package metadata is unavailable.
"""

from __future__ import annotations

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import ftlbridge
from ftlbridge import FTLBridgeError, UnresolvedMessageError


class TestPublicApi:
    """Every exported name is accessible."""

    def test_all_names_resolve(self) -> None:
        """Each name in __all__ is an attribute of the package."""
        for name in ftlbridge.__all__:
            assert hasattr(ftlbridge, name), name

    def test_version_is_string(self) -> None:
        """__version__ is always a non-empty string."""
        assert isinstance(ftlbridge.__version__, str)
        assert ftlbridge.__version__

    def test_version_fallback_without_metadata(self) -> None:
        """Uninstalled source trees report a development version."""
        with patch(
            "importlib.metadata.version", side_effect=PackageNotFoundError("ftlbridge")
        ):
            reloaded = importlib.reload(ftlbridge)
            assert reloaded.__version__ == "0.0.0+dev"
        importlib.reload(ftlbridge)


class TestErrorHierarchy:
    """Exception classes."""

    def test_unresolved_is_bridge_error_and_lookup_error(self) -> None:
        """UnresolvedMessageError can be caught either way."""
        assert issubclass(UnresolvedMessageError, FTLBridgeError)
        assert issubclass(UnresolvedMessageError, LookupError)

    def test_unresolved_message_text(self) -> None:
        """The message names the key and the searched chain."""
        error = UnresolvedMessageError("greeting", ("fr", "en"))

        assert error.message_id == "greeting"
        assert error.locales == ("fr", "en")
        assert str(error) == (
            "Message 'greeting' not found in any locale of fallback chain ('fr', 'en')"
        )
