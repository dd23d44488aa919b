"""
Pydantic schema definitions for API payloads.

Each domain (assets, contributions, goals, questions, portfolio)
defines its own Pydantic models.  The same models are kept in the
in‑memory store, so a record read back from the API is exactly the
record that was written.
"""
