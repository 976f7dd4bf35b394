"""Test package for Palm Reader.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP host and live reading service tests

Leverages pytest with pytest-check for soft assertions.
"""
