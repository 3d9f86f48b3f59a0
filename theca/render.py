"""Text output for listings, single notes and profile info."""

import click

from .layout import BODY_MARKER, LineFormat, format_field
from .models import Item, Stats


def bold(text: str, color: bool) -> str:
    return click.style(text, bold=True) if color else text


def format_header(line_format: LineFormat, color: bool = False) -> str:
    """Column labels followed by a dashed rule."""
    sep = line_format.separator()
    labels = sep.join(
        [
            format_field("id", line_format.id_width),
            format_field("title", line_format.title_width),
            format_field("status", line_format.status_width),
            format_field("last touched", line_format.touched_width),
        ]
    )
    rule = "-" * line_format.line_width()
    return bold(f"{labels}\n{rule}", color)


def format_item(item: Item, line_format: LineFormat, show_bodies: bool = False) -> str:
    """One listing line for a note.

    Notes with a body get a ``(+)`` marker unless bodies are printed
    beneath the line anyway.
    """
    title = item.title
    if item.body and not show_bodies:
        title = BODY_MARKER + title
    return line_format.separator().join(
        [
            format_field(str(item.id), line_format.id_width),
            format_field(title, line_format.title_width, truncate=True),
            format_field(item.status, line_format.status_width),
            format_field(item.last_touched, line_format.touched_width),
        ]
    )


def format_listing(
    items: list[Item],
    line_format: LineFormat,
    condensed: bool = False,
    show_bodies: bool = False,
    header: bool = True,
    color: bool = False,
) -> list[str]:
    """All lines of a listing, header included in expanded mode."""
    lines = []
    if header and not condensed:
        lines.append(format_header(line_format, color))
    for item in items:
        lines.append(format_item(item, line_format, show_bodies))
        if show_bodies:
            lines.extend(f"\t{line}" for line in item.body.splitlines())
    return lines


def _section(label: str, value: str, condensed: bool, color: bool) -> str:
    if condensed:
        return f"{bold(label + ': ', color)}{value}\n"
    heading = label + "\n" + "-" * len(label) + "\n"
    return f"{bold(heading, color)}{value}\n\n"


def format_view(item: Item, condensed: bool = False, color: bool = False) -> str:
    """Full display of a single note."""
    parts = [
        _section("id", str(item.id), condensed, color),
        _section("title", item.title, condensed, color),
    ]
    if item.status:
        parts.append(_section("status", item.status, condensed, color))
    parts.append(_section("last touched", item.last_touched, condensed, color))
    if item.body:
        parts.append(_section("body", item.body, condensed, color))
    return "".join(parts)


def format_stats(stats: Stats, color: bool = False) -> str:
    return (
        f"{bold('encrypted: ', color)}{str(stats.encrypted).lower()}\n"
        f"{bold('notes: ', color)}{stats.total}\n"
        f"{bold('statuses: ', color)}"
        f"[none: {stats.none}, started: {stats.started}, urgent: {stats.urgent}]\n"
    )
