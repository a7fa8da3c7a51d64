"""
RecipeHub backend.

Recipe sharing API with meal planning, grocery-list generation and
personalised recipe recommendations.
"""
