"""Unit tests for individual components in isolation.

Coverage:
    - controller/: Reading session transitions
    - imaging/: Media type checks and data URL encoding
    - agent/: Reader configuration and agent calls
    - ui/: Markdown rendering and page view selection

Uses mocks for the remote reading service. Leverages pytest-check for
multiple assertions per test.
"""
