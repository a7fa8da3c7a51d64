"""
Seed data ingestion package.

Responsibilities:
- Read the seed recipe and ingredient CSV files.
- Normalize rows into the canonical Recipe schema.
- Hand validated recipes to the recipe store.
"""
