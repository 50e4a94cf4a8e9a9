"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build the advisor prompt from the user's need and the candidate products.
- Call Groq LLM to pick products, score them and explain each pick.
- Graceful error responses when the LLM is unavailable or returns invalid output.
"""
