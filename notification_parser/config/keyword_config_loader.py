"""Load and validate the extensible keyword table used by the parser."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import yaml

from ..models.transaction import CATEGORY_VOCABULARY
from .settings import DEFAULT_KEYWORDS_FILE

logger = logging.getLogger(__name__)

# Keys used by the bundled keyword table
PATTERNS_KEY = "Patterns"
INCOME_KEY = "IncomeKeywords"
EXPENSE_KEY = "ExpenseKeywords"
CATEGORY_KEY = "CategoryKeywords"


class ConfigurationError(ValueError):
    """Raised when a keyword table is malformed."""


def _keyword_list(value, key: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(f"{key} must be a list of strings, got {type(value).__name__}")

    keywords = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"{key} contains an invalid keyword: {item!r}")
        keywords.append(item.strip().lower())
    return tuple(keywords)


@dataclass(frozen=True)
class KeywordConfig:
    """
    Immutable keyword table injected into the parser.

    Attributes:
        income_keywords: Extra keywords that mark a notification as income
        expense_keywords: Extra keywords that mark a notification as expense
        category_keywords: Extra keywords per vocabulary category
    """
    income_keywords: Tuple[str, ...] = ()
    expense_keywords: Tuple[str, ...] = ()
    category_keywords: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "KeywordConfig":
        """
        Build a config from a parsed YAML mapping.

        Accepts either ``{"Patterns": {...}}`` or the lists at top level.

        Raises:
            ConfigurationError: If the structure or any keyword is invalid
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Keyword table must be a mapping, got {type(data).__name__}"
            )

        if PATTERNS_KEY in data:
            data = data[PATTERNS_KEY]
            if not isinstance(data, dict):
                raise ConfigurationError(f"{PATTERNS_KEY} must be a mapping")

        category_keywords: Dict[str, Tuple[str, ...]] = {}
        raw_categories = data.get(CATEGORY_KEY) or {}
        if not isinstance(raw_categories, dict):
            raise ConfigurationError(f"{CATEGORY_KEY} must be a mapping of category to keywords")

        for category, keywords in raw_categories.items():
            if category not in CATEGORY_VOCABULARY:
                raise ConfigurationError(
                    f"Unknown category in {CATEGORY_KEY}: {category!r}. "
                    f"Valid categories: {', '.join(CATEGORY_VOCABULARY)}"
                )
            category_keywords[category] = _keyword_list(keywords, f"{CATEGORY_KEY}.{category}")

        return cls(
            income_keywords=_keyword_list(data.get(INCOME_KEY), INCOME_KEY),
            expense_keywords=_keyword_list(data.get(EXPENSE_KEY), EXPENSE_KEY),
            category_keywords=MappingProxyType(category_keywords),
        )

    @property
    def is_empty(self) -> bool:
        """Whether no extra keywords are configured."""
        return not (self.income_keywords or self.expense_keywords or self.category_keywords)


class KeywordConfigLoader:
    """Loads a keyword table from a YAML resource."""

    def __init__(self, path: Path = DEFAULT_KEYWORDS_FILE):
        """
        Initialize loader.

        Args:
            path: YAML file containing the keyword table
        """
        self.path = Path(path)

    def load(self, required: bool = False) -> KeywordConfig:
        """
        Load and validate the keyword table.

        Args:
            required: Raise instead of returning an empty table when the file is missing

        Returns:
            KeywordConfig instance

        Raises:
            ConfigurationError: If the file is malformed (or missing and required)
        """
        if not self.path.exists():
            if required:
                raise ConfigurationError(f"Keyword table not found: {self.path}")
            logger.warning(f"Keyword table not found, using built-in rules only: {self.path}")
            return KeywordConfig()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in keyword table {self.path}: {e}") from e

        config = KeywordConfig.from_dict(data)
        logger.info(
            f"Loaded keyword table {self.path.name}: "
            f"{len(config.income_keywords)} income, {len(config.expense_keywords)} expense, "
            f"{sum(len(v) for v in config.category_keywords.values())} category keywords"
        )
        return config


# Singleton instance
_config: Optional[KeywordConfig] = None


def get_keyword_config() -> KeywordConfig:
    """Get the keyword table loaded from DEFAULT_KEYWORDS_FILE (cached)."""
    global _config
    if _config is None:
        _config = KeywordConfigLoader().load()
    return _config
