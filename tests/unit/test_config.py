"""Tests for environment-driven pagination settings."""

from unittest.mock import patch

from src.core.config import (
    DEFAULT_BOUNDARY_COUNT,
    DEFAULT_SIBLING_COUNT,
    PaginationSettings,
    load_settings,
)
from src.core.pagination import PaginationConfig


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_defaults_when_unset(self) -> None:
        """Should use defaults when no env vars are set."""
        with patch.dict("os.environ", {}, clear=True):
            settings = load_settings()
        assert settings.boundary_count == DEFAULT_BOUNDARY_COUNT
        assert settings.sibling_count == DEFAULT_SIBLING_COUNT

    def test_reads_environment_variables(self) -> None:
        """Should read counts from the environment."""
        env = {"PAGINATION_BOUNDARY_COUNT": "2", "PAGINATION_SIBLING_COUNT": "3"}
        with patch.dict("os.environ", env, clear=True):
            settings = load_settings()
        assert settings == PaginationSettings(boundary_count=2, sibling_count=3)

    def test_invalid_value_falls_back_to_default(self) -> None:
        """Should ignore values that are not integers."""
        with patch.dict("os.environ", {"PAGINATION_SIBLING_COUNT": "lots"}, clear=True):
            settings = load_settings()
        assert settings.sibling_count == DEFAULT_SIBLING_COUNT

    def test_blank_value_falls_back_to_default(self) -> None:
        """Should treat an empty value as unset."""
        with patch.dict("os.environ", {"PAGINATION_BOUNDARY_COUNT": " "}, clear=True):
            settings = load_settings()
        assert settings.boundary_count == DEFAULT_BOUNDARY_COUNT

    def test_reads_environment_on_every_call(self) -> None:
        """Should not cache settings between calls."""
        with patch.dict("os.environ", {"PAGINATION_BOUNDARY_COUNT": "2"}, clear=True):
            first = load_settings()
        with patch.dict("os.environ", {"PAGINATION_BOUNDARY_COUNT": "4"}, clear=True):
            second = load_settings()
        assert first.boundary_count == 2
        assert second.boundary_count == 4


class TestPaginationSettingsBuild:
    """Tests for PaginationSettings.build method."""

    def test_applies_settings(self) -> None:
        """Should carry boundary and sibling counts into the config."""
        config = PaginationSettings(boundary_count=2, sibling_count=0).build(20, 10)
        assert config == PaginationConfig(
            count=20, page=10, boundary_count=2, sibling_count=0
        )

    def test_overrides_win(self) -> None:
        """Should let callers override any field."""
        config = PaginationSettings(boundary_count=2).build(
            20, boundary_count=1, hide_first=True
        )
        assert config.boundary_count == 1
        assert config.hide_first
        assert config.page == 1
