"""Search and category filtering over the loaded property list."""

from functools import lru_cache
from typing import Iterable, List, Tuple

import pandas as pd

from .models import Property


def _properties_frame(records: Tuple[Property, ...]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "name": [p.name for p in records],
            "location": [p.location for p in records],
            "type": [p.type for p in records],
        }
    )


@lru_cache(maxsize=64)
def _filter_cached(
    records: Tuple[Property, ...], search_term: str, category: str
) -> Tuple[Property, ...]:
    if not records:
        return ()
    df = _properties_frame(records)
    mask = pd.Series(True, index=df.index)
    if search_term:
        term = search_term.lower()
        # plain substring test, not a regex
        matches_name = df["name"].str.lower().str.contains(term, regex=False)
        matches_location = df["location"].str.lower().str.contains(term, regex=False)
        mask &= matches_name | matches_location
    if category:
        mask &= df["type"] == category
    return tuple(records[i] for i in df.index[mask.to_numpy()])


def filter_properties(
    records: Iterable[Property], search_term: str = "", category: str = ""
) -> List[Property]:
    """Return the records matching both the search term and the category.

    - search term: case-insensitive substring of name or location; empty
      matches everything
    - category: exact match on ``type``; empty matches everything
    - input order is kept
    """
    return list(_filter_cached(tuple(records), search_term or "", category or ""))


@lru_cache(maxsize=64)
def _types_cached(records: Tuple[Property, ...]) -> Tuple[str, ...]:
    if not records:
        return ()
    return tuple(sorted(_properties_frame(records)["type"].unique().tolist()))


def property_types(records: Iterable[Property]) -> List[str]:
    """Distinct categories present in ``records``, sorted ascending."""
    return list(_types_cached(tuple(records)))
