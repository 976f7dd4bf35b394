"""Integration tests for components working together.

Coverage:
    - FastAPI host with real HTTP requests
    - Full reading flow against the live Gemini API (when configured)

Requires GEMINI_API_KEY for the live reading tests.
"""
