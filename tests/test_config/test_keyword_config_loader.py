"""Tests for keyword table loading and validation."""
import pytest

from notification_parser.config import ConfigurationError, KeywordConfig, KeywordConfigLoader
from notification_parser.config.settings import DEFAULT_KEYWORDS_FILE


class TestKeywordConfigFromDict:
    """Tests for KeywordConfig.from_dict."""

    def test_patterns_wrapper(self):
        config = KeywordConfig.from_dict({
            "Patterns": {
                "IncomeKeywords": ["Tien Vao"],
                "ExpenseKeywords": ["spent"],
            }
        })
        assert config.income_keywords == ("tien vao",)
        assert config.expense_keywords == ("spent",)

    def test_top_level_lists(self):
        config = KeywordConfig.from_dict({"IncomeKeywords": ["cashback"]})
        assert config.income_keywords == ("cashback",)
        assert config.expense_keywords == ()

    def test_category_keywords(self):
        config = KeywordConfig.from_dict({"CategoryKeywords": {"Food": ["Circle K"]}})
        assert config.category_keywords["Food"] == ("circle k",)

    def test_none_is_empty(self):
        assert KeywordConfig.from_dict(None).is_empty

    def test_empty_mapping_is_empty(self):
        assert KeywordConfig.from_dict({"Patterns": {}}).is_empty

    @pytest.mark.parametrize("data", [
        ["spent"],
        {"Patterns": ["spent"]},
        {"IncomeKeywords": "cashback"},
        {"ExpenseKeywords": ["spent", ""]},
        {"ExpenseKeywords": ["spent", 42]},
        {"CategoryKeywords": ["Food"]},
        {"CategoryKeywords": {"Groceries": ["winmart"]}},
    ])
    def test_invalid_tables(self, data):
        with pytest.raises(ConfigurationError):
            KeywordConfig.from_dict(data)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            KeywordConfig.from_dict({"IncomeKeywords": 1})

    def test_category_keywords_are_read_only(self):
        config = KeywordConfig.from_dict({"CategoryKeywords": {"Food": ["gs25"]}})
        with pytest.raises(TypeError):
            config.category_keywords["Bills"] = ("evn",)


class TestKeywordConfigLoader:
    """Tests for loading YAML keyword tables."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "keywords.yaml"
        path.write_text(
            "Patterns:\n"
            "  IncomeKeywords:\n"
            "    - \"tiền vào\"\n"
            "  ExpenseKeywords:\n"
            "    - spent\n",
            encoding="utf-8",
        )
        config = KeywordConfigLoader(path).load()
        assert config.income_keywords == ("tiền vào",)
        assert config.expense_keywords == ("spent",)

    def test_missing_file_returns_empty(self, tmp_path):
        config = KeywordConfigLoader(tmp_path / "missing.yaml").load()
        assert config.is_empty

    def test_missing_file_required(self, tmp_path):
        with pytest.raises(ConfigurationError):
            KeywordConfigLoader(tmp_path / "missing.yaml").load(required=True)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("Patterns: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            KeywordConfigLoader(path).load()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert KeywordConfigLoader(path).load().is_empty

    def test_bundled_table(self):
        """The keyword table shipped in data/ is valid."""
        config = KeywordConfigLoader(DEFAULT_KEYWORDS_FILE).load(required=True)
        assert "spent" in config.expense_keywords
        assert "cashback" in config.income_keywords
        assert "circle k" in config.category_keywords["Food"]
