from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

import click

from lsx import __version__
from lsx.config import (
    AbsolutePath,
    Classify,
    ColorScale,
    ColorScaleMode,
    DisplayMode,
    ListingConfig,
    SortBy,
    When,
    compile_pattern,
    parse_choice,
)
from lsx.errors import ConfigurationError, FilesystemError, RenderError
from lsx.listing import run

_DISPLAY_MODE_KEY = "lsx.display_mode"


def _choice(enum_cls: type[Enum]) -> Callable[[click.Context, click.Parameter, Any], Any]:
    """Build a callback converting a flag value into a member of *enum_cls*."""

    def callback(ctx: click.Context, param: click.Parameter, value: str | None) -> Any:
        if value is None:
            return None
        try:
            return parse_choice(enum_cls, value)
        except ConfigurationError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param) from None

    return callback


def _metavar(enum_cls: type[Enum]) -> str:
    return "[" + "|".join(m.value for m in enum_cls) + "]"


def _pattern(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> re.Pattern[str] | None:
    if value is None:
        return None
    try:
        return compile_pattern(value)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from None


def _set_display_mode(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Record a layout flag; flags are processed in command-line order, so the last wins."""
    if value and param.name:
        ctx.meta[_DISPLAY_MODE_KEY] = DisplayMode(param.name)


def _layout_flag(*decls: str, help: str) -> Callable[[Any], Any]:
    return click.option(
        *decls, is_flag=True, expose_value=False, callback=_set_display_mode, help=help
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="lsx")
@click.argument("path", default=".", type=click.Path(path_type=Path))
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    metavar="N",
    help="Tree mode: do not show entries at this level or deeper.",
)
@click.option("--show-hidden", is_flag=True, help="Include names starting with '.'.")
@click.option(
    "--sort",
    "sort_by",
    default="name",
    metavar=_metavar(SortBy),
    callback=_choice(SortBy),
    show_default=True,
    help="Sort key.",
)
@click.option(
    "--pattern",
    default=None,
    metavar="REGEX",
    callback=_pattern,
    help="Only list files whose name matches REGEX (directories are always kept).",
)
@click.option("--show-size", is_flag=True, help="Append the size to each name.")
@_layout_flag("-1", "--oneline", help="One entry per line.")
@_layout_flag("-l", "--long", help="Table with type, size and modification time.")
@_layout_flag("-G", "--grid", help="Entries in columns.")
@_layout_flag("-T", "--tree", help="Indented tree (default).")
@click.option("-X", "--dereference", is_flag=True, help="Follow symlinks for metadata.")
@click.option(
    "-F",
    "--classify",
    default="auto",
    metavar=_metavar(Classify),
    callback=_choice(Classify),
    show_default=True,
    help="Append type indicators (/ @ = |).",
)
@click.option(
    "--color",
    "--colour",
    "color",
    default="auto",
    metavar=_metavar(When),
    callback=_choice(When),
    show_default=True,
    help="When to use colors.",
)
@click.option(
    "--color-scale",
    "--colour-scale",
    "color_scale",
    default=None,
    metavar=_metavar(ColorScale),
    callback=_choice(ColorScale),
    help="Color entries by age, size, or both.",
)
@click.option(
    "--color-scale-mode",
    "--colour-scale-mode",
    "color_scale_mode",
    default="fixed",
    metavar=_metavar(ColorScaleMode),
    callback=_choice(ColorScaleMode),
    show_default=True,
    help="Fixed color tiers or a continuous gradient.",
)
@click.option(
    "--icons",
    default="auto",
    metavar=_metavar(When),
    callback=_choice(When),
    show_default=True,
    help="When to show file type icons.",
)
@click.option("--no-quotes", is_flag=True, help="Do not quote names containing spaces.")
@click.option("--hyperlink", is_flag=True, help="Link names to their files (OSC 8).")
@click.option(
    "--absolute",
    "absolute_path",
    default="off",
    metavar=_metavar(AbsolutePath),
    callback=_choice(AbsolutePath),
    show_default=True,
    help="Show canonical absolute paths, or symlink targets with 'follow'.",
)
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=1),
    default=None,
    metavar="N",
    help="Screen width for the grid layout.",
)
@click.option("-x", "--across", is_flag=True, help="Fill the grid across rows, not down columns.")
@click.option("-R", "--recurse", is_flag=True, help="Flat layouts: recurse into directories.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    path: Path,
    max_depth: int | None,
    show_hidden: bool,
    sort_by: SortBy,
    pattern: re.Pattern[str] | None,
    show_size: bool,
    dereference: bool,
    classify: Classify,
    color: When,
    color_scale: ColorScale | None,
    color_scale_mode: ColorScaleMode,
    icons: When,
    no_quotes: bool,
    hyperlink: bool,
    absolute_path: AbsolutePath,
    width: int | None,
    across: bool,
    recurse: bool,
    verbose: bool,
) -> None:
    """lsx: list PATH as lines, a table, a grid or a tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ListingConfig(
            max_depth=max_depth,
            show_hidden=show_hidden,
            pattern=pattern,
            sort_by=sort_by,
            show_size=show_size,
            display_mode=ctx.meta.get(_DISPLAY_MODE_KEY, DisplayMode.TREE),
            classify=classify,
            dereference=dereference,
            color=color,
            color_scale=color_scale,
            color_scale_mode=color_scale_mode,
            icons=icons,
            quote_names=not no_quotes,
            hyperlink=hyperlink,
            absolute_path=absolute_path,
            screen_width=width,
            across=across,
            recurse=recurse,
        )
    except ConfigurationError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from None

    try:
        run(path, config)
    except (FilesystemError, RenderError) as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
