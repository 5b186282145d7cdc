"""
Data types for the todo swamp.

Items are immutable records; the only state change an item ever sees is
the one-way ``done`` transition, which the store performs by replacing the
stored record with a copy (see ``TodoList.mark_done``).
"""

from dataclasses import dataclass, field, replace
from typing import Union


@dataclass(frozen=True)
class Item:
    """
    A single todo item held by the store.

    Attributes:
        identity: Position in the store; assigned sequentially from 0
        description: Free text, tokenized into words when indexed
        tags: Ordered labels, without the leading ``#``
        done: True once the item has been marked done
    """
    identity: int
    description: str
    tags: tuple[str, ...] = ()
    done: bool = False

    @property
    def words(self) -> list[str]:
        """Whitespace-separated words of the description."""
        return self.description.split()

    def marked_done(self) -> "Item":
        """Return a copy with ``done`` set."""
        if self.done:
            return self
        return replace(self, done=True)

    def __str__(self) -> str:
        from .render import render_item
        return render_item(self)


# ---------------------------------------------------------------------------
# Requests: produced by the parser, consumed by the runner
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddQuery:
    """Add a new item."""
    description: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class DoneQuery:
    """Mark the item with this identity done."""
    identity: int


@dataclass(frozen=True)
class SearchQuery:
    """Search by positionally paired word and tag terms."""
    words: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


Query = Union[AddQuery, DoneQuery, SearchQuery]


# ---------------------------------------------------------------------------
# Results: produced by the runner, consumed by the renderer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Added:
    item: Item


@dataclass(frozen=True)
class Marked:
    """An item was marked done. Carries no payload for display."""
    identity: int


@dataclass(frozen=True)
class Found:
    items: list[Item] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


QueryResult = Union[Added, Marked, Found]
