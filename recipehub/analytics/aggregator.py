from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    recs = [e for e in events if e["type"] == "recommendation"]
    groceries = [e for e in events if e["type"] == "grocery_generate"]
    total = len(recs)

    # Requests per ranking mode
    mode_counter: Counter[str] = Counter(r.get("mode", "unknown") for r in recs)

    # Personalised vs popularity fallback
    personalized = sum(1 for r in recs if r.get("personalized"))
    cold_start = sum(1 for r in recs if r.get("mode") == "personalized" and not r.get("personalized"))

    # Most recommended recipes
    recipe_counter: Counter[str] = Counter()
    for r in recs:
        for rid in r.get("recipe_ids", []) or []:
            recipe_counter[rid] += 1
    top_recipes = [{"id": rid, "count": c} for rid, c in recipe_counter.most_common(10)]

    times = [r["response_time_ms"] for r in recs if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Cache stats
    cache_hits = sum(1 for r in recs if r.get("cache_hit"))
    cache_misses = total - cache_hits

    items = [g.get("items", 0) for g in groceries]

    return {
        "total_recommendations": total,
        "avg_response_time_ms": avg_time,
        "mode_usage": dict(mode_counter),
        "personalized_rate": round(personalized / total * 100, 1) if total else 0.0,
        "cold_start_requests": cold_start,
        "top_recipes": top_recipes,
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
        "grocery_lists_generated": len(groceries),
        "avg_grocery_items": round(sum(items) / len(items), 1) if items else 0.0,
    }
