"""Translation loading interface and implementations.

Defines the contract for loading catalogs per locale and provides loaders
for gettext PO files and nested YAML files.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Tuple

import structlog
import yaml

from pocatalog.i18n.catalog import TranslationCatalog
from pocatalog.i18n.models import PLURAL_SEPARATOR

logger = structlog.get_logger()


def flatten_mapping(
    data: Mapping[str, Any], prefix: str = ""
) -> Iterator[Tuple[str, str]]:
    """Flatten nested mappings into dotted (key, value) pairs.

    ``{"ui": {"button": {"save": "Save"}}}`` yields ``("ui.button.save", "Save")``.
    Scalar leaves are converted with str(); None leaves are skipped.

    Raises:
        ValueError: If a leaf is a list or another non-scalar value.
    """
    for name, value in data.items():
        key = f"{prefix}{PLURAL_SEPARATOR}{name}" if prefix else str(name)
        if isinstance(value, Mapping):
            yield from flatten_mapping(value, key)
        elif value is None:
            continue
        elif isinstance(value, (str, int, float, bool)):
            yield key, str(value)
        else:
            raise ValueError(
                f"Unsupported value for translation key {key}: {type(value).__name__}"
            )


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how translation files for a locale are found and
    parsed.
    """

    @abstractmethod
    def load(self, locale: str) -> TranslationCatalog:
        """Load translations for a specific locale.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for every locale found.

        Returns:
            Dict mapping locale tag to TranslationCatalog.
        """

    def clear_cache(self) -> None:
        """Drop any cached catalogs; loaders without a cache do nothing."""


class FileTranslationLoader(TranslationLoader):
    """Loader for ``<domain>.<locale>.<extension>`` files in one directory.

    All files for a locale are merged into a single catalog in sorted file
    name order; later files win on colliding keys.

    Attributes:
        translations_dir: Path to directory containing translation files.
        use_cache: Whether loaded catalogs are kept in memory.
        cache: Loaded catalogs by locale tag.
    """

    extension: str = ""

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize the loader.

        Args:
            translations_dir: Path to directory with translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_translation_loader",
            loader=type(self).__name__,
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @abstractmethod
    def _read_pairs(self, path: Path) -> List[Tuple[str, str]]:
        """Parse one file into flat (key, value) pairs.

        Raises:
            ValueError: If the file content is malformed.
        """

    def _files_for(self, locale: str) -> List[Path]:
        return sorted(self.translations_dir.glob(f"*.{locale}.{self.extension}"))

    def load(self, locale: str) -> TranslationCatalog:
        """Load and merge every file for a locale.

        Raises:
            FileNotFoundError: If no file exists for the locale.
            ValueError: If any file fails to parse.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale)
            return self.cache[locale]

        files = self._files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale)
        for path in files:
            catalog = catalog.update(self._read_pairs(path))

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(files),
            key_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def available_locales(self) -> List[str]:
        """Locale tags found in file names (``domain.<locale>.<extension>``)."""
        locales = set()
        for path in self.translations_dir.glob(f"*.{self.extension}"):
            parts = path.stem.split(".")
            if len(parts) >= 2 and parts[-1]:
                locales.add(parts[-1])
        return sorted(locales)

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load every locale found in the directory.

        Raises:
            ValueError: If no translation files are found at all.
        """
        locales = self.available_locales()
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for locale in locales:
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)

        return result

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class POTranslationLoader(FileTranslationLoader):
    """Loader for gettext ``<domain>.<locale>.po`` files."""

    extension = "po"

    def _read_pairs(self, path: Path) -> List[Tuple[str, str]]:
        from pocatalog.po.conversion import entry_pairs
        from pocatalog.po.errors import PoParseError
        from pocatalog.po.parser import parse_po

        text = path.read_text(encoding="utf-8")
        try:
            entries = parse_po(text)
        except PoParseError as e:
            logger.error(
                "po_parse_error",
                file=str(path),
                error_code=e.code,
                line=e.line_number,
                error=e.message,
            )
            raise ValueError(f"Failed to parse {path}: {e}") from e

        pairs = []
        for entry in entries:
            pairs.extend(entry_pairs(entry))
        return pairs


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for nested ``<domain>.<locale>.yml`` files.

    Expected format::

        ui:
          button:
            save: Save
        item:
          one: "{count} item"
          other: "{count} items"

    Nested mappings are flattened into dotted keys (``ui.button.save``).
    """

    extension = "yml"

    def _read_pairs(self, path: Path) -> List[Tuple[str, str]]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return []
        return list(flatten_mapping(data))
