"""Operations on the notes of an in-memory profile.

Notes are kept in a plain list in insertion order and looked up by a
linear scan on id.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from . import editor
from .environment import SystemEnvironment
from .errors import ItemNotFoundError, RegexError
from .models import NOSTATUS, STARTED, URGENT, Item, Profile, Stats, now_timestamp

logger = logging.getLogger(__name__)

EditorFunc = Callable[[str], str]
ReaderFunc = Callable[[], str]


@dataclass
class BodySource:
    """Where a note body should come from.

    Precedence is ``text``, then ``editor``, then ``stdin``. An empty
    ``text`` counts as not given.
    """

    text: str | None = None
    editor: bool = False
    stdin: bool = False

    def given(self) -> bool:
        return bool(self.text) or self.editor or self.stdin


def _default_editor(initial: str) -> str:
    return editor.edit_via_external_tool(initial, SystemEnvironment())


def resolve_status(started: bool = False, urgent: bool = False, none: bool = False) -> str | None:
    """Map status flags to a status string, or None if no flag was given."""
    if started:
        return STARTED
    if urgent:
        return URGENT
    if none:
        return NOSTATUS
    return None


def _clean_title(title: str) -> str:
    return title.replace("\n", "")


def _acquire_body(
    source: BodySource,
    current: str,
    edit_body: EditorFunc | None,
    read_body: ReaderFunc | None,
) -> str | None:
    if source.text:
        return source.text
    if source.editor:
        return (edit_body or _default_editor)(current)
    if source.stdin:
        return (read_body or editor.read_stdin)()
    return None


def _find_index(profile: Profile, item_id: int) -> int | None:
    for i, note in enumerate(profile.notes):
        if note.id == item_id:
            return i
    return None


def next_id(profile: Profile) -> int:
    """Id for a new note: the last note's id plus one.

    The last note in the list is used, not the highest id, so deleting the
    final note frees its id for reuse.
    """
    if not profile.notes:
        return 1
    return profile.notes[-1].id + 1


def add_item(
    profile: Profile,
    title: str,
    status: str | None = None,
    body: BodySource | None = None,
    edit_body: EditorFunc | None = None,
    read_body: ReaderFunc | None = None,
) -> Item:
    """Append a new note to the profile and return it."""
    text = _acquire_body(body or BodySource(), "", edit_body, read_body)
    item = Item(
        id=next_id(profile),
        title=_clean_title(title),
        status=status or NOSTATUS,
        body=text or "",
        last_touched=now_timestamp(),
    )
    profile.notes.append(item)
    logger.debug("Added note #%d", item.id)
    return item


def edit_item(
    profile: Profile,
    item_id: int,
    title: str | None = None,
    status: str | None = None,
    body: BodySource | None = None,
    edit_body: EditorFunc | None = None,
    read_body: ReaderFunc | None = None,
) -> Item:
    """Change one aspect of a note.

    Only the first applicable change is made: a non-empty title, else a
    status, else a body. ``last_touched`` is refreshed even when nothing
    else changes.

    Raises:
        ItemNotFoundError: If no note has ``item_id``.
    """
    index = _find_index(profile, item_id)
    if index is None:
        raise ItemNotFoundError(item_id)
    item = profile.notes[index]
    body = body or BodySource()

    if title:
        item.title = _clean_title(title)
    elif status is not None:
        item.status = status
    elif body.given():
        item.body = _acquire_body(body, item.body, edit_body, read_body)

    item.last_touched = now_timestamp()
    logger.debug("Edited note #%d", item.id)
    return item


def delete_item(profile: Profile, item_id: int) -> bool:
    """Remove a note by id, returning whether one was removed."""
    index = _find_index(profile, item_id)
    if index is None:
        return False
    del profile.notes[index]
    logger.debug("Deleted note #%d", item_id)
    return True


def get_item(profile: Profile, item_id: int) -> Item:
    """Return the note with ``item_id``.

    Raises:
        ItemNotFoundError: If there is no such note.
    """
    index = _find_index(profile, item_id)
    if index is None:
        raise ItemNotFoundError(item_id)
    return profile.notes[index]


def search_items(profile: Profile, pattern: str, search_body: bool = False) -> list[Item]:
    """Notes whose title (or body) matches a regular expression.

    Matches anywhere in the text, in collection order.

    Raises:
        RegexError: If ``pattern`` does not compile.
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise RegexError(str(e)) from e

    if search_body:
        return [n for n in profile.notes if regex.search(n.body)]
    return [n for n in profile.notes if regex.search(n.title)]


def limit_items(items: list[Item], limit: int = 0, reverse: bool = False) -> list[Item]:
    """First ``limit`` items (all when 0), optionally reversed afterwards."""
    if limit > 0:
        items = items[:limit]
    else:
        items = list(items)
    if reverse:
        items.reverse()
    return items


def list_items(profile: Profile, limit: int = 0, reverse: bool = False) -> list[Item]:
    return limit_items(profile.notes, limit, reverse)


def stats(profile: Profile) -> Stats:
    """Count notes by status."""
    return Stats(
        encrypted=profile.encrypted,
        total=len(profile.notes),
        none=sum(1 for n in profile.notes if n.status == NOSTATUS),
        started=sum(1 for n in profile.notes if n.status == STARTED),
        urgent=sum(1 for n in profile.notes if n.status == URGENT),
    )
