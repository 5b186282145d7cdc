"""
Command grammar.

    add "<description>" [#tag ...]
    done <identity>
    search [word | #tag ...]

One line yields one request. Tags are written with a leading ``#`` and
stored without it.
"""

import re

from .errors import ParseError
from .types import AddQuery, DoneQuery, Query, SearchQuery

TAG_PREFIX = "#"

# add "<description>" <rest>
_ADD_PATTERN = re.compile(r'^add\s+"([^"]*)"(.*)$')

# done <integer>
_DONE_PATTERN = re.compile(r'^done\s+(-?\d+)$')


def _parse_tag(token: str, line: str) -> str:
    if not token.startswith(TAG_PREFIX):
        raise ParseError(f"Expected a #tag, got {token!r}", line)
    tag = token[len(TAG_PREFIX):]
    if not tag:
        raise ParseError("Empty tag", line)
    return tag


def parse_add(line: str) -> AddQuery:
    match = _ADD_PATTERN.match(line)
    if not match:
        raise ParseError('Usage: add "<description>" [#tag ...]', line)
    description, rest = match.groups()
    if rest and not rest[0].isspace():
        raise ParseError("Expected whitespace after description", line)
    tags = tuple(_parse_tag(token, line) for token in rest.split())
    return AddQuery(description=description, tags=tags)


def parse_done(line: str) -> DoneQuery:
    match = _DONE_PATTERN.match(line)
    if not match:
        raise ParseError("Usage: done <identity>", line)
    return DoneQuery(identity=int(match.group(1)))


def parse_search(line: str) -> SearchQuery:
    words: list[str] = []
    tags: list[str] = []
    for term in line.split()[1:]:
        if term.startswith(TAG_PREFIX):
            tags.append(_parse_tag(term, line))
        else:
            words.append(term)
    return SearchQuery(words=tuple(words), tags=tuple(tags))


_COMMANDS = {
    "add": parse_add,
    "done": parse_done,
    "search": parse_search,
}


def parse_line(line: str) -> Query:
    """
    Parse one command line into a request.

    Raises:
        ParseError: If the line is not a valid command
    """
    stripped = line.strip()
    keyword = stripped.split(maxsplit=1)[0] if stripped else ""
    parser = _COMMANDS.get(keyword)
    if parser is None:
        raise ParseError(f"Unknown command: {keyword!r}" if keyword else "Empty command", line)
    return parser(stripped)
