"""
Grocery list generation.

Responsibilities:
- Map free-text ingredient names onto grocery aisles.
- Merge the ingredient lines of planned meals into one shopping list.
- Keep one editable list per user and week.
"""
