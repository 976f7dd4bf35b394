"""Interaction controller for the palm reading page.

Owns the only mutable state of the application: the uploaded image, the
reading and the error message of one page session.
"""

from palm_reader.controller.session import ReadingBackend, ReadingSession

__all__ = ["ReadingBackend", "ReadingSession"]
