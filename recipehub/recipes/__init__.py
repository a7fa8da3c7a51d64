"""
Recipe collaborator.

Responsibilities:
- Define the canonical Recipe schema and its closed enumerations.
- Hold the in-memory recipe collection seeded from CSV.
- Apply the few mutations other features need (cook count, ratings).
"""
