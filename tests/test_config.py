"""Unit tests for configuration loading and validation."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
import sys

from pydantic import ValidationError


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class TestConfig(unittest.TestCase):
    """Tests for `Config` and the YAML helpers."""

    def test_defaults(self) -> None:
        from lore_codex.config_manager import Config

        config = Config()

        self.assertEqual(config.encyclopedia.backend, "local")
        self.assertEqual(config.encyclopedia.data_dir, "data")
        self.assertEqual(config.encyclopedia.question_languages, ["en"])
        self.assertEqual(config.encyclopedia.min_query_length, 2)

    def test_load_yaml(self) -> None:
        from lore_codex.config_manager import load_config

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "conf.yaml"
            path.write_text(
                "encyclopedia:\n"
                "  data_dir: lore\n"
                "  question_languages: [en, fr]\n"
                "  display_language: fr\n",
                encoding="utf-8",
            )
            config = load_config(path)

        self.assertEqual(config.encyclopedia.data_dir, "lore")
        self.assertEqual(config.encyclopedia.question_languages, ["en", "fr"])
        self.assertEqual(config.encyclopedia.display_language, "fr")

    def test_empty_yaml_uses_defaults(self) -> None:
        from lore_codex.config_manager import load_config

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "conf.yaml"
            path.write_text("", encoding="utf-8")
            config = load_config(path)

        self.assertEqual(config.encyclopedia.backend, "local")

    def test_missing_file(self) -> None:
        from lore_codex.config_manager import read_yaml

        with self.assertRaises(FileNotFoundError):
            read_yaml("/nonexistent/conf.yaml")

    def test_http_backend_requires_base_url(self) -> None:
        from lore_codex.config_manager import validate_config

        with self.assertRaises(ValidationError):
            validate_config({"encyclopedia": {"backend": "http"}})

    def test_question_languages_cannot_be_empty(self) -> None:
        from lore_codex.config_manager import validate_config

        with self.assertRaises(ValidationError):
            validate_config({"encyclopedia": {"question_languages": []}})

    def test_unknown_question_language_is_rejected(self) -> None:
        from lore_codex.config_manager import validate_config

        with self.assertRaises(ValidationError):
            validate_config({"encyclopedia": {"question_languages": ["en", "de"]}})

    def test_field_descriptions_are_localized(self) -> None:
        from lore_codex.config_manager import EncyclopediaConfig

        english = EncyclopediaConfig.get_field_description("min_query_length")
        french = EncyclopediaConfig.get_field_description("min_query_length", "fr")

        self.assertIn("Minimum", english)
        self.assertIn("minimal", french)
        self.assertIsNone(EncyclopediaConfig.get_field_description("unknown"))


if __name__ == "__main__":
    unittest.main()
