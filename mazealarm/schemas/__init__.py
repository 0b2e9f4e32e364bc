"""Pydantic Schemas — wire format of the device resources.

Invariants:
    - Schemas are the canonical JSON field layout for requests and responses
    - Schemas decode shape only; business rules live in core/validate_device.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
