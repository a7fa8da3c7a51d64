from __future__ import annotations

from collections import Counter
from typing import Sequence

from ..recipes.models import Category, Cuisine
from .models import CookingHistoryEntry, PreferenceProfile


def build_profile(history: Sequence[CookingHistoryEntry]) -> PreferenceProfile:
    """Count cuisines and categories over *history*.

    Entries without a cuisine (or category) are left out of that count.
    """
    cuisine_counter: Counter[Cuisine] = Counter()
    category_counter: Counter[Category] = Counter()
    for entry in history:
        if entry.cuisine:
            cuisine_counter[entry.cuisine] += 1
        if entry.category:
            category_counter[entry.category] += 1

    return PreferenceProfile(
        cuisine_counts={c: cuisine_counter[c] for c in Cuisine if c in cuisine_counter},
        category_counts={c: category_counter[c] for c in Category if c in category_counter},
        history_length=len(history),
    )
