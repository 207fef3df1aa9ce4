"""Localized user-facing messages for the CLI, backed by Project Fluent."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fluent.runtime import FluentLocalization, FluentResourceLoader

DEFAULT_LOCALE = "en"
LOCALES_DIR = Path(__file__).parent / "locales"
RESOURCE_IDS = ["main.ftl"]

_ISOLATION_MARKS = dict.fromkeys(map(ord, "\u2068\u2069"))

logger = logging.getLogger(__name__)


def available_locales() -> list[str]:
    """Locales that ship a message resource, e.g. ['de', 'en']."""
    return sorted(p.name for p in LOCALES_DIR.iterdir() if (p / RESOURCE_IDS[0]).is_file())


def detect_system_locale() -> str:
    """Language part of LC_ALL, LC_MESSAGES or LANG (e.g. 'de_DE.UTF-8' -> 'de')."""
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            return value.split('_')[0].split('.')[0].lower() or DEFAULT_LOCALE
    return DEFAULT_LOCALE


class Localizer:
    """Formats messages for one locale, falling back to English."""

    def __init__(self, locale: str | None = None):
        requested = (locale or detect_system_locale()).replace('-', '_').split('_')[0].lower()
        if requested not in available_locales():
            logger.debug("No messages for locale %r, using %r", requested, DEFAULT_LOCALE)
            requested = DEFAULT_LOCALE
        self.locale = requested

        chain = [requested] if requested == DEFAULT_LOCALE else [requested, DEFAULT_LOCALE]
        loader = FluentResourceLoader(str(LOCALES_DIR / "{locale}"))
        self._l10n = FluentLocalization(chain, RESOURCE_IDS, loader)

    def get(self, msg_id: str, **args: object) -> str:
        """Format a message; unknown ids render as '[msg_id]'."""
        value = self._l10n.format_value(msg_id, {name: _fluent_arg(v) for name, v in args.items()})
        if value == msg_id:
            return f"[{msg_id}]"
        # Placeables come back wrapped in FSI/PDI marks; terminal output wants them bare
        return value.translate(_ISOLATION_MARKS)


def _fluent_arg(value: object) -> object:
    # Fluent only accepts strings, numbers and dates as arguments
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return str(value)
