"""Unit tests for the formatting helpers."""

import pytest
from anytree import AsciiStyle, ContStyle

from fstree.formatting import DisplayConfig, format_data_volume, format_timestamp, info_line, title_block


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 Byte"),
        (1024, "1024 Byte"),
        (1025, "1 kB"),
        (1024 * 1024, "1024 kB"),
        (3 * 1024 * 1024 + 7, "3 MB"),
        (2 * 1024 * 1024 * 1024 + 1, "2 GB"),
    ],
)
def test_format_data_volume(num_bytes, expected):
    """Test that sizes use the largest unit they strictly exceed."""
    assert format_data_volume(num_bytes) == expected


def test_format_timestamp():
    assert format_timestamp(0) == "1970-01-01 00:00:00 UTC"
    assert format_timestamp(1_700_000_000_123) == "2023-11-14 22:13:20 UTC"


def test_info_line_pads_label():
    assert info_line("Path:", "/a", 10) == "Path:     /a"
    # Labels longer than the width are not truncated
    assert info_line("Modification time:", "x", 5) == "Modification time:x"


def test_display_config_defaults():
    config = DisplayConfig()
    assert isinstance(config.style, ContStyle)
    assert config.label_width == 20
    assert config.rule() == "═" * 30


def test_display_config_is_per_instance():
    """Test that configs do not share state."""
    ascii_config = DisplayConfig(style=AsciiStyle(), rule_width=4, rule_char="-")
    assert ascii_config.rule() == "----"
    assert isinstance(DisplayConfig().style, ContStyle)


def test_title_block():
    assert title_block("Title", DisplayConfig(rule_width=5)) == "Title\n═════"
