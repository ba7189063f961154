"""Tests for error handling.

Scanning never raises; only invalid configuration does.
"""

import pytest

from socialscan import ConfigError, ScanConfig, SocialScanError, parse


class TestConfigValidation:
    """ScanConfig rejects ambiguous setups."""

    def test_multi_char_marker(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(tag_markers=frozenset({"##"}))
        assert exc_info.value.field == "tag_markers"

    def test_empty_marker(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig(mention_markers=frozenset({""}))

    def test_non_string_marker(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig(tag_markers=frozenset({1}))  # type: ignore[arg-type]

    def test_empty_link_prefix(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(link_prefixes=("http://", ""))
        assert exc_info.value.field == "link_prefixes"

    def test_overlapping_markers(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(tag_markers=frozenset("#@"))
        assert exc_info.value.field == "mention_markers"
        assert "'@'" in str(exc_info.value)

    def test_whitespace_marker_clash(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(whitespace=frozenset(" #"))
        assert exc_info.value.field == "whitespace"

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig.from_dict({"link_prefixes": [""]})

    def test_empty_sets_allowed(self) -> None:
        config = ScanConfig(tag_markers=frozenset(), whitespace=frozenset())
        assert parse("#a b @c d", config=config).mentions == ("@c d",)


class TestErrorHierarchy:
    """Exception classes and messages."""

    def test_config_error_is_socialscan_error(self) -> None:
        assert issubclass(ConfigError, SocialScanError)
        assert issubclass(SocialScanError, Exception)

    def test_message_format(self) -> None:
        error = ConfigError("whitespace", "bad")
        assert str(error) == "Invalid config field 'whitespace': bad"
        assert error.message == "bad"


class TestScanningNeverRaises:
    """Malformed input is not an error."""

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "#",
            "@+#",
            "http://",
            "https:// ",
            "\x00#\x00",
            "퟿@",
            "#" * 10_000,
            "a" * 10_000 + "@",
        ],
    )
    def test_odd_inputs(self, source: str) -> None:
        result = parse(source)
        assert isinstance(result.tags, tuple)
