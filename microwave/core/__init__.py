"""Core Layer — pure domain logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or schemas/
    - Errors raised here are MicrowaveError subclasses, never bare exceptions

Design Decisions:
    - Functional core separated from imperative shell
"""
