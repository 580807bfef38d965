"""Tests for pagination config anomaly classification."""

from src.core.errors import ConfigAnomaly, classify_config, is_degenerate
from src.core.pagination import PaginationConfig


class TestConfigAnomaly:
    """Tests for ConfigAnomaly enum."""

    def test_all_anomalies_defined(self) -> None:
        """Should have all expected anomalies."""
        assert ConfigAnomaly.PAGE_BELOW_RANGE
        assert ConfigAnomaly.PAGE_ABOVE_RANGE
        assert ConfigAnomaly.EMPTY_COUNT
        assert ConfigAnomaly.NEGATIVE_BOUNDARY
        assert ConfigAnomaly.NEGATIVE_SIBLING


class TestClassifyConfig:
    """Tests for classify_config function."""

    def test_valid_config_has_no_anomalies(self) -> None:
        """A page inside the range should classify as clean."""
        assert classify_config(PaginationConfig(count=10, page=5)) == set()

    def test_zero_counts_are_valid(self) -> None:
        """Zero boundary and sibling counts are not anomalies."""
        config = PaginationConfig(count=10, boundary_count=0, sibling_count=0)
        assert classify_config(config) == set()

    def test_page_below_range(self) -> None:
        """Page 0 should classify as PAGE_BELOW_RANGE."""
        config = PaginationConfig(count=10, page=0)
        assert classify_config(config) == {ConfigAnomaly.PAGE_BELOW_RANGE}

    def test_page_above_range(self) -> None:
        """A page past count should classify as PAGE_ABOVE_RANGE."""
        config = PaginationConfig(count=10, page=11)
        assert classify_config(config) == {ConfigAnomaly.PAGE_ABOVE_RANGE}

    def test_empty_count_hides_page_anomalies(self) -> None:
        """With nothing to paginate the page is not checked."""
        config = PaginationConfig(count=0, page=7)
        assert classify_config(config) == {ConfigAnomaly.EMPTY_COUNT}

    def test_negative_counts(self) -> None:
        """Negative boundary and sibling counts should both be reported."""
        config = PaginationConfig(count=10, boundary_count=-1, sibling_count=-4)
        assert classify_config(config) == {
            ConfigAnomaly.NEGATIVE_BOUNDARY,
            ConfigAnomaly.NEGATIVE_SIBLING,
        }


class TestIsDegenerate:
    """Tests for is_degenerate function."""

    def test_empty_count_is_degenerate(self) -> None:
        """EMPTY_COUNT should leave nothing to render."""
        assert is_degenerate({ConfigAnomaly.EMPTY_COUNT})

    def test_other_anomalies_are_not_degenerate(self) -> None:
        """Page and count anomalies still render pages."""
        assert not is_degenerate(set())
        assert not is_degenerate(
            {
                ConfigAnomaly.PAGE_ABOVE_RANGE,
                ConfigAnomaly.NEGATIVE_BOUNDARY,
                ConfigAnomaly.NEGATIVE_SIBLING,
            }
        )
