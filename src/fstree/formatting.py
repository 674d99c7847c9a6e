"""Text formatting helpers for tree output and entry details.

Display settings are carried by a DisplayConfig value that callers pass into
rendering, so nothing here depends on module-level state.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from anytree.render import AbstractStyle, ContStyle

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB


@dataclass(frozen=True)
class DisplayConfig:
    """Presentation settings for rendered trees and entry descriptions.

    Attributes:
        style: anytree render style used for the branch prefixes.
        label_width: Column width labels are padded to in entry descriptions.
        rule_width: Length of the horizontal rules around titles and summaries.
        rule_char: Character the horizontal rules are drawn with.
    """

    style: AbstractStyle = field(default_factory=ContStyle)
    label_width: int = 20
    rule_width: int = 30
    rule_char: str = "═"

    def rule(self) -> str:
        return self.rule_char * self.rule_width


def format_data_volume(num_bytes: int) -> str:
    """Format a byte count with the largest unit it strictly exceeds.

    Example:
        >>> format_data_volume(512)
        '512 Byte'
        >>> format_data_volume(5 * 1024 * 1024 + 1)
        '5 MB'
    """
    if num_bytes > GIB:
        return f"{num_bytes // GIB} GB"
    if num_bytes > MIB:
        return f"{num_bytes // MIB} MB"
    if num_bytes > KIB:
        return f"{num_bytes // KIB} kB"
    return f"{num_bytes} Byte"


def format_timestamp(milliseconds: int) -> str:
    """Format milliseconds since the epoch as a UTC date and time.

    Example:
        >>> format_timestamp(86_400_000)
        '1970-01-02 00:00:00 UTC'
    """
    moment = datetime.fromtimestamp(milliseconds / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def info_line(label: str, value: str, width: int) -> str:
    return f"{label:<{width}}{value}"


def title_block(title: str, config: DisplayConfig) -> str:
    return f"{title}\n{config.rule()}"
