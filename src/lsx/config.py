"""Listing configuration: closed policy enumerations and the immutable config."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from lsx.errors import ConfigurationError


class SortBy(Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"


class DisplayMode(Enum):
    ONELINE = "oneline"
    LONG = "long"
    GRID = "grid"
    TREE = "tree"


class Classify(Enum):
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


class When(Enum):
    """Tri-state switch shared by --color and --icons."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    def resolve(self, interactive: bool) -> bool:
        if self is When.ALWAYS:
            return True
        if self is When.NEVER:
            return False
        return interactive


class ColorScale(Enum):
    ALL = "all"
    AGE = "age"
    SIZE = "size"


class ColorScaleMode(Enum):
    FIXED = "fixed"
    GRADIENT = "gradient"


class AbsolutePath(Enum):
    ON = "on"
    FOLLOW = "follow"
    OFF = "off"


E = TypeVar("E", bound=Enum)


def parse_choice(enum_cls: type[E], value: str) -> E:
    """Map a flag value onto its enum member.

    Raises:
        ConfigurationError: If *value* names no member of *enum_cls*.
    """
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError(f"{value!r} is not one of: {choices}") from None


def compile_pattern(text: str) -> re.Pattern[str]:
    """Compile a --pattern regex, raising ConfigurationError when invalid."""
    try:
        return re.compile(text)
    except re.error as exc:
        raise ConfigurationError(f"{text!r} is not a valid regular expression: {exc}") from None


@dataclass(frozen=True)
class ListingConfig:
    """Every policy knob consumed by traversal, decoration and the renderers."""

    max_depth: int | None = None
    show_hidden: bool = False
    pattern: re.Pattern[str] | None = None
    sort_by: SortBy = SortBy.NAME
    show_size: bool = False
    display_mode: DisplayMode = DisplayMode.TREE
    classify: Classify = Classify.AUTO
    dereference: bool = False
    color: When = When.AUTO
    color_scale: ColorScale | None = None
    color_scale_mode: ColorScaleMode = ColorScaleMode.FIXED
    icons: When = When.AUTO
    quote_names: bool = True
    hyperlink: bool = False
    absolute_path: AbsolutePath = AbsolutePath.OFF
    screen_width: int | None = None
    across: bool = False
    recurse: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigurationError("--max-depth must be >= 0")
        if self.screen_width is not None and self.screen_width < 1:
            raise ConfigurationError("--width must be >= 1")

    def matches(self, name: str) -> bool:
        """Return True if *name* passes the --pattern filter."""
        return self.pattern is None or self.pattern.search(name) is not None
