"""Locale Fallback Example - Partial Translations.

Demonstrates how a Translations table resolves keys through the fallback
chain (current locale, then default locales) and how to observe fallbacks.

Scenarios covered:
1. Partial Latvian translations falling back to English
2. Multi-step default chain (Baltic states)
3. Monitoring missing translations with on_fallback

Python 3.13+.
"""

from __future__ import annotations

from ftlbridge import FallbackInfo, LocaleConfig, create


def example_1_basic_fallback() -> None:
    """Example 1: Basic two-locale fallback (Latvian -> English)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv -> en)")
    print("=" * 60)

    config = LocaleConfig("lv", ["en"])
    t = create(
        {
            "lv": "welcome = Sveiki, { $name }!\ncart = Grozs\n",
            "en": "welcome = Hello, { $name }!\ncart = Cart\ncheckout = Checkout\n",
        },
        config=config,
    )

    print(t.welcome(name="Anna"))  # Sveiki, Anna!
    print(t.cart())  # Grozs
    print(t.checkout())  # Checkout (from en)
    print(f"checkout served by: {t.resolve_locale('checkout')}")
    print()


def example_2_baltic_chain() -> None:
    """Example 2: Estonian -> Lithuanian -> Latvian -> English."""
    print("=" * 60)
    print("Example 2: Default Chain (et -> lt -> lv -> en)")
    print("=" * 60)

    config = LocaleConfig("et", ["lt", "lv", "en"])
    t = create(
        {
            "et": "home = Avaleht\n",
            "lt": "home = Pradžia\nabout = Apie\n",
            "lv": "home = Sākums\nabout = Par\ncontact = Kontakti\n",
            "en": "home = Home\nabout = About\ncontact = Contact\nhelp = Help\n",
        },
        config=config,
    )

    for key in t:
        print(f"{key:>8}: {t[key]():<10} [{t.resolve_locale(key)}]")
    print()


def example_3_monitor_fallbacks() -> None:
    """Example 3: Collect keys missing from the requested locale."""
    print("=" * 60)
    print("Example 3: on_fallback Monitoring")
    print("=" * 60)

    missing: list[FallbackInfo] = []
    config = LocaleConfig("de", ["en"])
    t = create(
        {
            "de": "save = Speichern\n",
            "en": "save = Save\ncancel = Cancel\ndelete = Delete\n",
        },
        config=config,
        on_fallback=missing.append,
    )

    for key in t:
        t[key]()

    for info in missing:
        print(f"'{info.message_id}' missing in {info.requested_locale}, "
              f"used {info.resolved_locale}")
    print()


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_baltic_chain()
    example_3_monitor_fallbacks()
