"""Decoration pipeline: icons, classification suffixes, scale colors, names.

Nothing here reads file metadata; every layout composes an entry's fragments in
the same order: color open, icon, (hyperlinked) name, classification
suffix, optional size suffix, color close.
"""

from __future__ import annotations

import colorsys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from lsx._platform import HAS_SPECIAL_FILES, Terminal
from lsx.config import Classify, ColorScale, ColorScaleMode, ListingConfig, When
from lsx.formatters.size import format_size
from lsx.model import Entry, NodeType

Color = int | tuple[int, int, int]

FOLDER_ICON = "\U0001f4c1 "
DEFAULT_ICON = "\U0001f4c4 "

_EXTENSION_ICONS: dict[str, str] = {
    "txt": "\U0001f4c4 ",
    "rs": "\U0001f980 ",
    "py": "\U0001f40d ",
    "js": "\U0001f7e8 ",
    "html": "\U0001f310 ",
    "css": "\U0001f3a8 ",
    "json": "\U0001f527 ",
    "md": "\U0001f4dd ",
    "png": "\U0001f5bc\ufe0f ",
    "jpg": "\U0001f5bc\ufe0f ",
    "jpeg": "\U0001f5bc\ufe0f ",
    "gif": "\U0001f5bc\ufe0f ",
    "mp3": "\U0001f3b5 ",
    "wav": "\U0001f3b5 ",
    "ogg": "\U0001f3b5 ",
    "mp4": "\U0001f3a5 ",
    "avi": "\U0001f3a5 ",
    "mkv": "\U0001f3a5 ",
    "pdf": "\U0001f4da ",
    "zip": "\U0001f5dc\ufe0f ",
    "tar": "\U0001f5dc\ufe0f ",
    "gz": "\U0001f5dc\ufe0f ",
    "exe": "\u2699\ufe0f ",
}

# 256-color palette indices for the fixed scale tiers.
GREEN, YELLOW, ORANGE, RED = 46, 226, 208, 196
_TIER_COLORS = (GREEN, YELLOW, ORANGE, RED)

DAY = 60 * 60 * 24
AGE_TIERS = (DAY, 7 * DAY, 30 * DAY)
MAX_AGE = 365 * DAY

KB = 1024
SIZE_TIERS = (KB, KB * KB, 100 * KB * KB)
MAX_SIZE = KB * KB * KB


def icon_for(name: str, node_type: NodeType, links_to_dir: bool = False) -> str:
    if node_type is NodeType.DIRECTORY or links_to_dir:
        return FOLDER_ICON
    ext = Path(name).suffix[1:]
    return _EXTENSION_ICONS.get(ext, DEFAULT_ICON)


def classify_suffix(node_type: NodeType, classify: Classify) -> str:
    """Return the one-character type indicator for *node_type*, if any."""
    if classify is Classify.NEVER:
        return ""
    if node_type is NodeType.DIRECTORY:
        return "/"
    if node_type is NodeType.SYMLINK:
        return "@"
    if classify is Classify.ALWAYS and HAS_SPECIAL_FILES:
        if node_type is NodeType.SOCKET:
            return "="
        if node_type is NodeType.FIFO:
            return "|"
    return ""


def hue_to_rgb(hue: float) -> tuple[int, int, int]:
    """Convert a hue in degrees to RGB at full saturation and value."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360.0, 1.0, 1.0)
    return int(r * 255), int(g * 255), int(b * 255)


def _gradient(value: float, ceiling: float) -> tuple[int, int, int]:
    ratio = min(max(value / ceiling, 0.0), 1.0)
    return hue_to_rgb((1.0 - ratio) * 120.0)


def _tier(value: float, tiers: tuple[int, ...]) -> int:
    for index, limit in enumerate(tiers):
        if value < limit:
            return _TIER_COLORS[index]
    return _TIER_COLORS[-1]


def age_color(age: float, mode: ColorScaleMode) -> Color:
    age = max(age, 0.0)
    if mode is ColorScaleMode.GRADIENT:
        return _gradient(age, MAX_AGE)
    return _tier(age, AGE_TIERS)


def size_color(size: int, mode: ColorScaleMode) -> Color:
    if mode is ColorScaleMode.GRADIENT:
        return _gradient(size, MAX_SIZE)
    return _tier(size, SIZE_TIERS)


def format_name(name: str, quote: bool) -> str:
    if quote and " " in name:
        return f'"{name}"'
    return name


def hyperlink(path: Path, text: str) -> str:
    """Wrap *text* in an OSC 8 link to *path*; relative paths use the cwd."""
    target = path if path.is_absolute() else Path.cwd() / path
    return f"\x1b]8;;{target.as_uri()}\x1b\\{text}\x1b]8;;\x1b\\"


def size_suffix(size: int) -> str:
    return f" [{format_size(size)}]"


@dataclass(frozen=True)
class Decorator:
    """Config-bound decoration with color and icon policy already resolved.

    Scale colors follow the color policy alone (only ``never`` turns them
    off); the summary is colored only when the output is also interactive.
    """

    config: ListingConfig
    use_color: bool
    summary_color: bool
    use_icons: bool
    now: float

    @classmethod
    def create(
        cls, config: ListingConfig, terminal: Terminal, now: float | None = None
    ) -> Decorator:
        interactive = terminal.is_interactive()
        use_color = config.color is not When.NEVER
        return cls(
            config=config,
            use_color=use_color,
            summary_color=use_color and interactive,
            use_icons=config.icons.resolve(interactive),
            now=time.time() if now is None else now,
        )

    def icon(self, entry: Entry) -> str:
        if not self.use_icons:
            return ""
        return icon_for(entry.name, entry.node_type, entry.links_to_dir)

    def suffix(self, entry: Entry) -> str:
        return classify_suffix(entry.node_type, self.config.classify)

    def name(self, entry: Entry) -> str:
        return format_name(entry.name, self.config.quote_names)

    def style_args(self, entry: Entry) -> dict[str, Any]:
        """Return click.style keyword arguments for the entry's scale color."""
        scale = self.config.color_scale
        if scale is None or not self.use_color:
            return {}
        mode = self.config.color_scale_mode
        if scale is ColorScale.AGE:
            return {"fg": age_color(self.now - entry.modified_at, mode)}
        if scale is ColorScale.SIZE:
            return {"fg": size_color(entry.size, mode)}
        return {
            "fg": age_color(self.now - entry.modified_at, mode),
            "bg": size_color(entry.size, mode),
        }

    def colorize(self, entry: Entry, text: str) -> str:
        args = self.style_args(entry)
        return click.style(text, **args) if args else text

    def label(self, entry: Entry, show_size: bool | None = None) -> str:
        """Icon, (hyperlinked) name, suffix and optional size, without color."""
        name = self.name(entry)
        if self.config.hyperlink:
            name = hyperlink(entry.display_path, name)
        text = self.icon(entry) + name + self.suffix(entry)
        if show_size is None:
            show_size = self.config.show_size
        if show_size:
            text += size_suffix(entry.size)
        return text

    def render(self, entry: Entry, show_size: bool | None = None) -> str:
        """Fully decorated label for *entry*."""
        return self.colorize(entry, self.label(entry, show_size))
