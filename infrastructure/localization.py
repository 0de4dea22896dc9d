import json
import os
from typing import Dict, List

class LocalizationManager:
    """
    Loads UI and log strings from ``locales/<lang>.json``.
    Missing keys fall back to the English file, then to the key itself.
    """

    FALLBACK_LANG = "en"

    def __init__(self, locales_dir: str, default_lang: str = FALLBACK_LANG):
        self.locales_dir = locales_dir
        self._current_lang = default_lang
        self.translations: Dict[str, str] = {}
        self.fallback: Dict[str, str] = self._read(self.FALLBACK_LANG)
        if not self.load_language(default_lang):
            self._current_lang = self.FALLBACK_LANG
            self.translations = dict(self.fallback)

    @property
    def current_language(self) -> str:
        return self._current_lang

    def get_available_languages(self) -> List[str]:
        """Scans the locales folder and returns available language codes."""
        if not os.path.isdir(self.locales_dir):
            return []
        return sorted(f[:-5] for f in os.listdir(self.locales_dir) if f.endswith(".json"))

    def _read(self, lang_code: str) -> Dict[str, str]:
        lang_file = os.path.join(self.locales_dir, f"{lang_code}.json")
        if not os.path.exists(lang_file):
            return {}
        try:
            with open(lang_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[Localization] Error reading '{lang_code}': {e}")
            return {}

    def load_language(self, lang_code: str) -> bool:
        """Switches language; returns False and keeps the current one if unavailable."""
        translations = self._read(lang_code)
        if not translations:
            print(f"[Localization] Warning: no translations for '{lang_code}'")
            return False
        self.translations = translations
        self._current_lang = lang_code
        return True

    def get(self, key: str, **kwargs) -> str:
        """Gets translated string by key with formatting support."""
        text = self.translations.get(key) or self.fallback.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, ValueError, IndexError):
                return text
        return text


_base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOCALES_PATH = os.path.join(_base_dir, "locales")

i18n = LocalizationManager(LOCALES_PATH, default_lang=os.getenv("UI_LANGUAGE", "en"))

_ = i18n.get
