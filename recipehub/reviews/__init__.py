"""
Recipe reviews.

Responsibilities:
- Store one rating/comment per user and recipe.
- Keep recipe average ratings in step with their reviews.
- Expose a user's approved ratings as a recommendation signal.
"""
