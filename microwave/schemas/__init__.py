"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; numeric bounds stay in core
      so every caller gets the same OutOfRangeError
    - Domain types from core/ used for enum fields

Design Decisions:
    - Responses built from core snapshots (from_attributes), never the reverse
"""
