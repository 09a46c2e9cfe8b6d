"""Locale catalogs for user-facing strings.

Layout: ``i18n/<locale>/<name>.json``; every JSON file of a locale is
merged into one catalog.  ``en`` is canonical: every other locale must
carry exactly its key set (see :func:`check_parity`).
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

from portfolio_content.errors import UnknownLocaleError

CANONICAL_LOCALE = "en"


def normalize_locale(locale: str) -> str:
    """``es-ES`` / ``es_ES`` / ``ES`` -> ``es``."""
    return locale.replace("_", "-").split("-")[0].strip().lower()


def available_locales() -> list[str]:
    root = resources.files(__name__)
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and not entry.name.startswith(("_", "."))
    )


@lru_cache(maxsize=None)
def _load(locale: str) -> dict[str, Any]:
    if locale not in available_locales():
        raise UnknownLocaleError(locale)
    folder = resources.files(__name__) / locale
    catalog: dict[str, Any] = {}
    for entry in sorted(folder.iterdir(), key=lambda e: e.name):
        if entry.name.endswith(".json"):
            catalog.update(json.loads(entry.read_text(encoding="utf-8")))
    if not catalog:
        raise UnknownLocaleError(locale)
    return catalog


def load_catalog(locale: str) -> dict[str, Any]:
    """Return the merged catalog for *locale* (region suffix ignored)."""
    return _load(normalize_locale(locale))


def extract_keys(obj: object, prefix: str = "") -> set[str]:
    """Recursively extract all leaf key paths from a nested dict."""
    keys: set[str] = set()
    if isinstance(obj, dict):
        for k, v in obj.items():
            full = f"{prefix}.{k}" if prefix else k
            keys.update(extract_keys(v, full) or {full})
    else:
        # Lists are leaf values
        keys.add(prefix)
    return keys


def check_parity() -> list[dict]:
    """Compare every locale against ``en``. Return a list of key errors."""
    en_keys = extract_keys(load_catalog(CANONICAL_LOCALE))
    errors: list[dict] = []
    for locale in available_locales():
        if locale == CANONICAL_LOCALE:
            continue
        keys = extract_keys(load_catalog(locale))
        for key in sorted(en_keys - keys):
            errors.append({"locale": locale, "key": key, "type": "missing_key"})
        for key in sorted(keys - en_keys):
            errors.append({"locale": locale, "key": key, "type": "extra_key"})
    return errors
