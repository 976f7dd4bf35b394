"""Palm Reader - generated palm readings from a photograph.

Combines NiceGUI for the page, FastAPI as its host, agno with Gemini for
the reading, and Pydantic for data validation.

Components:
    - controller: Reading session state machine
    - imaging: File reading and data URL encoding
    - agent: Remote reading service
    - ui: Web page and markdown rendering
    - api: HTTP host
    - models: Shared schemas
"""

__version__ = "0.1.0"
