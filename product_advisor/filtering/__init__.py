"""
Smart local filtering.

Responsibilities:
- Pull a price ceiling out of the user's free-text need.
- Infer catalog categories from keyword tables.
- Score and rank catalog items against query tokens.
- Narrow the catalog to a small candidate set before it is sent to the LLM.
"""
