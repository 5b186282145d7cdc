"""
Search across the word and tag indexes of a TodoList.

Word terms and tag terms are paired by position. At each position the
matches are the union of the word matches and the tag matches, so an item
needs to satisfy only one of the two. When one list is longer, its extra
terms are searched on their own.

Results from all positions are concatenated without deduplication (an item
matching at two positions appears twice), done items are dropped, and the
whole list is ordered newest first.
"""

import logging
from itertools import zip_longest
from typing import TYPE_CHECKING, Optional, Sequence

from .types import Item

if TYPE_CHECKING:
    from .store import TodoList

logger = logging.getLogger(__name__)


def match_position(
    todo_list: "TodoList",
    word: Optional[str] = None,
    tag: Optional[str] = None,
) -> list[Item]:
    """
    Active items matching one pair position.

    Args:
        todo_list: Store to search
        word: Word term at this position, or None
        tag: Tag term at this position, or None

    Returns:
        Matching active items, in no particular order
    """
    identities: set[int] = set()
    if word is not None:
        identities |= todo_list.word_index.lookup(word)
    if tag is not None:
        identities |= todo_list.tag_index.lookup(tag)

    result = []
    for identity in identities:
        item = todo_list.get_active(identity)
        if item is not None:
            result.append(item)
    return result


def search(
    todo_list: "TodoList",
    words: Sequence[str] = (),
    tags: Sequence[str] = (),
) -> list[Item]:
    """
    Search ``todo_list`` by word and tag terms.

    Returns items sorted by identity, highest first. The returned items
    are the store's own records and reflect its state at call time.
    """
    found: list[Item] = []
    for position, (word, tag) in enumerate(zip_longest(words, tags)):
        matches = match_position(todo_list, word, tag)
        logger.debug(
            "Position %d (word=%r, tag=%r): %d matches",
            position, word, tag, len(matches),
        )
        found.extend(matches)

    found.sort(key=lambda item: item.identity, reverse=True)
    return found
