"""
Recipe recommendation engine.

Responsibilities:
- Turn a user's cooking history into cuisine/category preference counts.
- Score and rank approved candidate recipes against those preferences.
- Fall back to popularity ranking when there is no history.
- Offer similarity, trending and seasonal ranking modes.
"""
