import csv
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOCALE_TRACK_MISSING_KEYS = True


class TranslationManager:
    """
    Manages translations loaded from one or more labels.tsv files.

    File layout: first column is the label key, every further column is a
    language code (header row), e.g. ``key<TAB>en<TAB>ru``.
    Missing keys are logged once per (label, lang).
    """

    def __init__(self):
        self.translations = {}  # {lang: {label: text}}
        self.coverage = {}      # {lang: float}
        self.file_path: Path | None = None
        self._missing_keys_logged = set()

    def load_files(self, file_paths: list[Path]) -> None:
        """Loads and merges several translation files (first one wins for file_path)."""
        self.translations = {}
        self.coverage = {}
        self.file_path = None
        all_labels: set[str] = set()

        for file_path in file_paths:
            if self.file_path is None:
                self.file_path = file_path.resolve()
            with open(file_path, encoding="utf-8", newline="") as f:
                reader = csv.reader(f, delimiter="\t")
                header = next(reader, None)
                if not header:
                    continue
                langs = header[1:]
                for lang in langs:
                    self.translations.setdefault(lang, {})

                for row in reader:
                    if not row or row[0].startswith("#"):
                        continue
                    label = row[0]
                    all_labels.add(label)
                    for i, lang in enumerate(langs):
                        text = row[i + 1] if i + 1 < len(row) else ""
                        self.translations[lang][label] = text

        row_count = len(all_labels)
        for lang in self.translations:
            translated = sum(bool(v) for v in self.translations[lang].values())
            self.coverage[lang] = translated / row_count if row_count else 1.0
        logger.debug("Loaded %d labels for languages %s", row_count, list(self.translations))

    def load_file(self, file_path: Path) -> None:
        """Convenience wrapper for a single file."""
        self.load_files([file_path])

    def available_languages(self) -> list[str]:
        return list(self.translations.keys())

    def t(self, label: str, lang: str) -> str:
        """
        Returns the translation or the label itself as fallback.
        Missing keys are logged only once (if tracking is enabled).
        """
        value = self.translations.get(lang, {}).get(label)
        if value:
            return value

        if LOCALE_TRACK_MISSING_KEYS and (label, lang) not in self._missing_keys_logged:
            logger.warning("Missing translation key '%s' (lang=%s)", label, lang)
            self._missing_keys_logged.add((label, lang))

        return label


# Global instance
translations = TranslationManager()
