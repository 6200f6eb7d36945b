"""Filtering and ordering of entries.

Both storage implementations route their reads through these functions so
that they agree on which entries match and in what order they come back.
"""

import unicodedata
from collections.abc import Iterable

from heathen_index.features.entries.dtos import Entry, EntrySort

ALL_CATEGORIES = "all"


def title_sort_key(entry: Entry) -> tuple[str, str, str]:
    """Collation key approximating a locale-aware title comparison.

    Accents and case are folded for the primary comparison, so "Mjölnir"
    sorts among the M's. The exact title, then the id, break ties.
    """
    decomposed = unicodedata.normalize("NFKD", entry.title)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c))
    return folded.casefold(), entry.title, entry.id


def sort_by_title(entries: Iterable[Entry]) -> list[Entry]:
    """Return a new list ordered by title ascending."""
    return sorted(entries, key=title_sort_key)


def matches_category(entry: Entry, category: str | None) -> bool:
    """True when ``category`` is absent, the wildcard, or equal to the entry's."""
    if not category or category.lower() == ALL_CATEGORIES:
        return True
    return entry.category.value.lower() == category.lower()


def matches_query(entry: Entry, query: str) -> bool:
    """Case-insensitive substring match on title, description or a related term."""
    if not query:
        return True

    term = query.lower()
    if term in entry.title.lower() or term in entry.description.lower():
        return True
    return any(term in related.lower() for related in entry.related_terms or ())


def filter_entries(
    entries: Iterable[Entry], query: str = "", category: str | None = None
) -> list[Entry]:
    """Apply the category and text filters, then order by title.

    The input is never modified; a fresh list is returned.
    """
    return sort_by_title(
        entry
        for entry in entries
        if matches_category(entry, category) and matches_query(entry, query)
    )


def apply_sort(entries: list[Entry], order: EntrySort) -> list[Entry]:
    """Reorder an already title-sorted list according to ``order``."""
    if order is EntrySort.RECENT:
        # Stable sort keeps title order among entries created at the same instant.
        return sorted(entries, key=lambda entry: entry.created_at, reverse=True)
    return list(entries)
