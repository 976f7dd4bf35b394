"""NiceGUI interface - thin visualization layer for the reading flow.

Responsibilities:
    - Upload zone accepting image files
    - Loading indicator while the reading is generated
    - Reading display rendered from markdown
    - Error banner and reset

Contains no business logic. All state lives in the reading session.
"""
