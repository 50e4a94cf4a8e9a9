"""
Advisory layer.

Responsibilities:
- Decide which catalog products are sent to the LLM (smart filter toggle).
- Hand the candidates to the LLM ranker and collect its recommendations.
- Sort recommendations deterministically for presentation.
"""
