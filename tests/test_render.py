"""Tests for listing, view and info output."""

from theca import render
from theca.layout import LineFormat
from theca.models import Item, Stats


def note(item_id, title, status="", body=""):
    return Item(id=item_id, title=title, status=status, body=body, last_touched="2015-01-22 10:00:00")


def test_header_expanded(sample_profile):
    fmt = LineFormat.for_items(sample_profile.notes)
    header = render.format_header(fmt)
    labels, rule = header.split("\n")
    assert labels.startswith("id  title")
    assert "status" in labels
    assert labels.rstrip().endswith("last touched")
    assert rule == "-" * fmt.line_width()


def test_item_line_has_body_marker(sample_profile):
    fmt = LineFormat.for_items(sample_profile.notes)
    line = render.format_item(sample_profile.notes[1], fmt)
    assert line.startswith("2   (+) Write report")
    assert "Started" in line
    assert line.endswith("2015-01-22 11:00:00")
    assert len(line) == fmt.line_width()


def test_item_line_condensed(sample_profile):
    fmt = LineFormat.for_items(sample_profile.notes, condensed=True)
    line = render.format_item(sample_profile.notes[2], fmt)
    assert line == "3 Call bank        U 2015-01-22"


def test_listing_shows_bodies(sample_profile):
    fmt = LineFormat.for_items(sample_profile.notes)
    lines = render.format_listing(sample_profile.notes[1:2], fmt, show_bodies=True)
    assert len(lines) == 4
    assert "(+)" not in lines[1]
    assert lines[2:] == ["\tdraft", "\tsection two"]


def test_listing_condensed_has_no_header(sample_profile):
    fmt = LineFormat.for_items(sample_profile.notes, condensed=True)
    lines = render.format_listing(sample_profile.notes, fmt, condensed=True)
    assert len(lines) == 3


def test_long_title_truncated():
    notes = [note(1, "x" * 100)]
    fmt = LineFormat.for_items(notes, console_width=60)
    line = render.format_item(notes[0], fmt)
    assert len(line) == 60
    assert "x..." in line


def test_view_expanded():
    item = Item(id=4, title="Call bank", status="", body="", last_touched="2015-01-22 12:00:00")
    assert render.format_view(item) == (
        "id\n--\n4\n\n"
        "title\n-----\nCall bank\n\n"
        "last touched\n------------\n2015-01-22 12:00:00\n\n"
    )


def test_view_condensed(sample_profile):
    text = render.format_view(sample_profile.notes[1], condensed=True)
    assert text == (
        "id: 2\n"
        "title: Write report\n"
        "status: Started\n"
        "last touched: 2015-01-22 11:00:00\n"
        "body: draft\nsection two\n"
    )


def test_stats():
    text = render.format_stats(Stats(encrypted=True, total=3, none=1, started=0, urgent=2))
    assert text == "encrypted: true\nnotes: 3\nstatuses: [none: 1, started: 0, urgent: 2]\n"


def test_bold_only_with_color():
    assert render.bold("x", False) == "x"
    assert render.bold("x", True) != "x"
