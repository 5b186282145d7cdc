"""
Fuzzy token index.

Maps a query token to the identities that have an indexed token of which
the query is a subsequence: its characters appear in the indexed token in
the same order, not necessarily adjacent. "hlo" matches "hello"; "" matches
everything that has been indexed.

Two lookup paths share one contract:

- Short tokens (up to ``max_precompute_length`` characters) are expanded
  into every distinct subsequence up front, so a lookup is a dict hit.
  A token of length n has at most 2^n subsequences, which is why this is
  capped.
- Longer tokens are kept verbatim and tested with a direct subsequence
  scan at lookup time.
"""

import logging
from itertools import combinations
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_MAX_PRECOMPUTE_LENGTH = 10


def is_subsequence(query: str, token: str) -> bool:
    """True if ``query`` can be obtained from ``token`` by deleting characters."""
    if len(query) > len(token):
        return False
    remaining = iter(token)
    return all(ch in remaining for ch in query)


def subsequences(token: str) -> Iterator[str]:
    """
    Yield every distinct subsequence of ``token``, including "" and the
    token itself.

    Repeated characters produce repeated selections ("aa" has the
    selections "", "a", "a", "aa"); only the first of each is yielded.
    """
    seen: set[str] = set()
    for length in range(len(token) + 1):
        for chars in combinations(token, length):
            sub = "".join(chars)
            if sub not in seen:
                seen.add(sub)
                yield sub


class FuzzyIndex:
    """
    Subsequence index from tokens to item identities.

    Grows only: there is no removal. Items that are later marked done
    stay indexed and are filtered out by the caller.
    """

    def __init__(self, max_precompute_length: int = DEFAULT_MAX_PRECOMPUTE_LENGTH):
        if max_precompute_length < 0:
            raise ValueError(
                f"max_precompute_length must be >= 0: {max_precompute_length}"
            )
        self._max_precompute_length = max_precompute_length
        # subsequence -> identities (short tokens, expanded)
        self._expanded: dict[str, set[int]] = {}
        # token -> identities (long tokens, scanned at lookup)
        self._long: dict[str, set[int]] = {}
        # every token indexed verbatim, for __contains__/__len__
        self._tokens: set[str] = set()

    @property
    def max_precompute_length(self) -> int:
        return self._max_precompute_length

    def insert(self, identity: int, token: str) -> None:
        """Register ``identity`` as matching every subsequence of ``token``."""
        self._tokens.add(token)
        if len(token) > self._max_precompute_length:
            if token not in self._long:
                logger.debug("Token of length %d kept for scanning: %r", len(token), token)
            self._long.setdefault(token, set()).add(identity)
            return
        for sub in subsequences(token):
            self._expanded.setdefault(sub, set()).add(identity)

    def insert_many(self, identity: int, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.insert(identity, token)

    def lookup(self, query: str) -> set[int]:
        """
        Identities with an indexed token of which ``query`` is a subsequence.

        Returns a new set; an unknown query yields an empty set.
        """
        matches = set(self._expanded.get(query, ()))
        for token, identities in self._long.items():
            if is_subsequence(query, token):
                matches.update(identities)
        return matches

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return (
            f"FuzzyIndex(tokens={len(self._tokens)}, "
            f"expanded={len(self._expanded)}, long={len(self._long)})"
        )
