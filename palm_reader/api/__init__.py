"""FastAPI host for the palm reading page.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI reading page (mounted at startup)
"""

from palm_reader.api.app import app, create_app

__all__ = ["app", "create_app"]
