"""Tests for application configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from airac_explorer.core.config import (
    AppConfig,
    get_app_config,
    load_app_config,
    reset_app_config,
)


@pytest.fixture(autouse=True)
def clean_singleton():
    """Reset the global config around each test."""
    reset_app_config()
    yield
    reset_app_config()


class TestAppConfig:
    """Tests for AppConfig.load."""

    def test_defaults(self) -> None:
        """Test built-in defaults."""
        config = AppConfig()

        assert config.default_page_size == 24
        assert config.upcoming_count == 3
        assert config.export_dir is None
        assert config.calendar_name == "AIRAC Cycles"

    def test_load_section(self, tmp_path: Path) -> None:
        """Test values under the airac section."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "airac:\n  default_page_size: 48\n  calendar_name: Ops\n  export_dir: exports\n",
            encoding="utf-8",
        )
        config = AppConfig()

        assert config.load(path) is True
        assert config.default_page_size == 48
        assert config.calendar_name == "Ops"
        assert config.export_dir == Path("exports")
        assert config.sources == [path]

    def test_load_top_level(self, tmp_path: Path) -> None:
        """Test values without a section wrapper."""
        path = tmp_path / "config.yaml"
        path.write_text("upcoming_count: 5\n", encoding="utf-8")
        config = AppConfig()

        assert config.load(path)
        assert config.upcoming_count == 5

    def test_invalid_values_ignored(self, tmp_path: Path) -> None:
        """Test wrong types and unknown keys leave defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "airac:\n  default_page_size: 0\n  upcoming_count: yes\n  theme: dark\n",
            encoding="utf-8",
        )
        config = AppConfig()

        assert config.load(path)
        assert config.default_page_size == 24
        assert config.upcoming_count == 3
        assert not hasattr(config, "theme")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file is not an error."""
        config = AppConfig()
        assert config.load(tmp_path / "absent.yaml") is False
        assert config.sources == []

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test unparseable YAML is reported as a failed load."""
        path = tmp_path / "config.yaml"
        path.write_text("airac: [unclosed\n", encoding="utf-8")
        assert AppConfig().load(path) is False

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        assert AppConfig().load(path) is False


class TestLoadAppConfig:
    """Tests for bundled defaults plus user overlay."""

    def test_bundled_defaults(self, tmp_path: Path) -> None:
        """Test the bundled file loads without a user file."""
        config = load_app_config(tmp_path / "absent.yaml")

        assert config.default_page_size == 24
        assert len(config.sources) == 1
        assert config.sources[0].name == "airac.yaml"

    def test_user_overlay(self, tmp_path: Path) -> None:
        """Test the user file overrides bundled values."""
        user = tmp_path / "config.yaml"
        user.write_text("airac:\n  default_page_size: 12\n", encoding="utf-8")

        config = load_app_config(user)

        assert config.default_page_size == 12
        assert config.sources[-1] == user

    def test_singleton(self, tmp_path: Path) -> None:
        """Test the global config is loaded once."""
        with patch("airac_explorer.core.config.get_user_dir", return_value=tmp_path):
            first = get_app_config()
            assert get_app_config() is first
