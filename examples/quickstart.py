"""Quickstart example for ftlbridge.

Builds translations for two locales from inline FTL, then formats messages
through the key-to-function table while switching the current locale.

Note: Formatting errors are logged, not raised. Enable logging to see them.
"""

import logging

from ftlbridge import LocaleConfig, UnresolvedMessageError, create, ftl

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Inline FTL with ftl()
print("=" * 50)
print("Example 1: Inline FTL")
print("=" * 50)

EN = ftl(
    """
    greeting = Hello, { $name }!
    tagline = Translations written inline,
      | wrapped over several lines.
    """
)
print(EN)

# ftl() strips all indentation, select variants included, so they stay in a plain string.
EN += """
inbox = { $count ->
    [one] You have one new message.
   *[other] You have { $count } new messages.
}
"""

FR = ftl(
    """
    greeting = Bonjour, { $name } !
    """
)

config = LocaleConfig(default_locales=["en"])
translations = create({"en": EN, "fr": FR}, config=config)

# Example 2: Formatting by key
print("=" * 50)
print("Example 2: Formatting")
print("=" * 50)

print(translations.greeting({"name": "Ana"}))
# Output: Hello, Ana!
print(translations["tagline"]())
# Output: Translations written inline, wrapped over several lines.

# Example 3: Switching locale at runtime
print("\n" + "=" * 50)
print("Example 3: Current Locale")
print("=" * 50)

config.current_locale = "fr"
print(translations.greeting(name="Ana"))
# Output: Bonjour, Ana !
print(translations.inbox(count=1))
# Output: You have one new message.  (fr lacks the key; falls back to en)

# Example 4: Unresolvable keys
print("\n" + "=" * 50)
print("Example 4: Unresolved Message")
print("=" * 50)

only_lv = create({"lv": "sveiki = Sveiki!"}, config=LocaleConfig())
try:
    only_lv.sveiki()
except UnresolvedMessageError as e:
    print(f"[ERROR] {e}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
