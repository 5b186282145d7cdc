"""
In-memory record store.

The store is the source of truth for:
- Item identity (dense, starting at 0, equal to the storage position)
- Item content (description and tags, immutable once added)
- The done flag

Description words and tags are fed into two fuzzy indexes when an item is
added. Indexes never shrink; done items are filtered at query time.
"""

import logging
from typing import Iterator, Optional, Sequence

from .errors import NotFoundError
from .fuzzy import DEFAULT_MAX_PRECOMPUTE_LENGTH, FuzzyIndex
from .types import Item

logger = logging.getLogger(__name__)


class TodoList:
    """
    Append-only ordered collection of items plus their fuzzy indexes.

    One instance is created per process and passed explicitly to every
    request handler. Not thread-safe; callers serialize access.
    """

    def __init__(self, max_precompute_length: int = DEFAULT_MAX_PRECOMPUTE_LENGTH):
        """
        Args:
            max_precompute_length: Longest token the indexes expand into
                subsequences up front; longer tokens are scanned on lookup
        """
        self._items: list[Item] = []
        self._word_index = FuzzyIndex(max_precompute_length)
        self._tag_index = FuzzyIndex(max_precompute_length)

    @property
    def word_index(self) -> FuzzyIndex:
        """Index over description words."""
        return self._word_index

    @property
    def tag_index(self) -> FuzzyIndex:
        """Index over tags."""
        return self._tag_index

    def add(self, description: str, tags: Sequence[str] = ()) -> Item:
        """
        Store a new item and index its words and tags.

        Returns the stored item. Its identity is the number of items
        added before it.
        """
        item = Item(
            identity=len(self._items),
            description=description,
            tags=tuple(tags),
        )
        self._items.append(item)
        self._word_index.insert_many(item.identity, item.words)
        self._tag_index.insert_many(item.identity, item.tags)
        logger.debug(
            "Added item %d (%d words, %d tags)",
            item.identity, len(item.words), len(item.tags),
        )
        return item

    def mark_done(self, identity: int) -> Item:
        """
        Mark an item done. Marking an already-done item is a no-op.

        Returns the (done) item.

        Raises:
            NotFoundError: If ``identity`` was never assigned
        """
        if not self._in_range(identity):
            raise NotFoundError(identity)
        item = self._items[identity]
        if item.done:
            logger.debug("Item %d already done", identity)
            return item
        item = item.marked_done()
        self._items[identity] = item
        logger.debug("Marked item %d done", identity)
        return item

    def get(self, identity: int) -> Optional[Item]:
        """Item by identity, done or not; None if never assigned."""
        if not self._in_range(identity):
            return None
        return self._items[identity]

    def get_active(self, identity: int) -> Optional[Item]:
        """Item by identity, only if it exists and is not done."""
        item = self.get(identity)
        if item is None or item.done:
            return None
        return item

    def search(self, words: Sequence[str] = (), tags: Sequence[str] = ()) -> list[Item]:
        """Fuzzy search; see ``swamp.search.search``."""
        from .search import search
        return search(self, words, tags)

    def _in_range(self, identity: int) -> bool:
        return 0 <= identity < len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        done = sum(1 for item in self._items if item.done)
        return f"TodoList(items={len(self._items)}, done={done})"
