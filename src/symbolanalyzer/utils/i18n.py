from __future__ import annotations

"""
Internationalization (i18n) Utility.

Loads JSON message catalogs from interface/locales and resolves
dot-notation keys ('cli.errors.missing_input') with optional named
placeholders. Unknown keys resolve to an explicit default or to the key.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "interface", "locales")


class I18n:
    """Message catalog for one locale."""

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self._locales_dir = locales_dir
        self._messages: Dict[str, Any] = {}
        self.locale = locale
        self.load_locale(locale)

    @property
    def is_loaded(self) -> bool:
        return bool(self._messages)

    def load_locale(self, locale: str) -> None:
        """Replace the active catalog; a missing or broken file leaves it empty."""
        path = os.path.join(self._locales_dir, f"{locale}.json")
        try:
            with open(path, "r", encoding="utf-8") as f:
                messages = json.load(f)
        except FileNotFoundError:
            logger.warning(f"I18n: locale catalog missing at '{path}'.")
            messages = {}
        except (OSError, ValueError) as e:
            logger.error(f"I18n: unreadable locale catalog '{path}': {e}")
            messages = {}

        self._messages = messages if isinstance(messages, dict) else {}
        self.locale = locale

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a message.

        Args:
            key: Dot-separated path inside the catalog.
            default: Text used when the key is absent.
            **kwargs: Values for named placeholders.

        Returns:
            str: The formatted message.
        """
        node: Any = self._messages
        for part in key.split("."):
            node = node.get(part) if isinstance(node, dict) else None

        template = node if isinstance(node, str) else (default if default is not None else key)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            logger.debug(f"I18n: cannot format '{key}' with {sorted(kwargs)}")
            return template


i18n = I18n(DEFAULT_LOCALE)
