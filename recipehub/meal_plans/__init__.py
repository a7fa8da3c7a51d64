"""
Meal planning.

Responsibilities:
- Schedule recipes onto dates and meal slots for a user.
- Resolve "YYYY-WW" week identifiers into date ranges.
- Record cooked meals into the user's cooking history.
"""
