"""
Output formatting.

Each result becomes one block of text; the runner adds the trailing newline.

    0 "hello world" #tag1<TAB>#tag2
    Done
"""

from .types import Added, Found, Item, Marked, QueryResult

DONE_TEXT = "Done"


def render_tags(tags) -> str:
    return "\t".join(f"#{tag}" for tag in tags)


def render_item(item: Item) -> str:
    """Render ``<identity> "<description>"`` plus tab-separated #tags if any."""
    line = f'{item.identity} "{item.description}"'
    if item.tags:
        line += " " + render_tags(item.tags)
    return line


def render_result(result: QueryResult) -> str:
    if isinstance(result, Added):
        return render_item(result.item)
    if isinstance(result, Marked):
        return DONE_TEXT
    if isinstance(result, Found):
        return "\n".join(render_item(item) for item in result.items)
    raise TypeError(f"Unknown result type: {type(result).__name__}")
