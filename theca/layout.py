"""Column widths for note listings."""

from dataclasses import dataclass

from .models import Item

ELLIPSIS = "..."
BODY_MARKER = "(+) "


@dataclass
class LineFormat:
    """Widths of the id, title, status and last touched columns."""

    colsep: int = 0
    id_width: int = 0
    title_width: int = 0
    status_width: int = 0
    touched_width: int = 0

    @classmethod
    def for_items(cls, items: list[Item], condensed: bool = False, console_width: int = 0) -> "LineFormat":
        """Size the columns to fit ``items``.

        Widths are taken from the longest id, title and status among the
        items. If ``console_width`` is known and the line would be wider,
        the title column gives up the difference, as long as it stays
        positive.
        """
        line_format = cls(colsep=1 if condensed else 2)

        line_format.id_width = max((len(str(n.id)) for n in items), default=0)
        # keep the "id" header intact
        if line_format.id_width < 2 and not condensed:
            line_format.id_width = 2

        line_format.title_width = max((len(n.title) for n in items), default=0)
        if any(n.body for n in items):
            line_format.title_width += len(BODY_MARKER)
        # keep the "title" header intact
        if line_format.title_width < 5 and not condensed:
            line_format.title_width = 5

        if any(n.status for n in items):
            if condensed:
                # only the first letter, S or U
                line_format.status_width = 1
            else:
                line_format.status_width = max(len(n.status) for n in items)

        line_format.touched_width = 10 if condensed else 19

        line_width = line_format.line_width()
        if console_width > 0 and line_width > console_width:
            overflow = line_width - console_width
            if line_format.title_width - overflow > 0:
                line_format.title_width -= overflow

        return line_format

    def line_width(self) -> int:
        return (
            self.id_width
            + self.title_width
            + self.status_width
            + self.touched_width
            + 3 * self.colsep
        )

    def separator(self) -> str:
        return " " * self.colsep


def format_field(value: str, width: int, truncate: bool = False) -> str:
    """Pad or cut ``value`` to exactly ``width`` characters.

    With ``truncate`` set, an over-long value wider than 3 columns ends in
    an ellipsis.
    """
    if len(value) > width and width > 3 and truncate:
        return value[: width - 3] + ELLIPSIS
    return value[:width].ljust(width)
