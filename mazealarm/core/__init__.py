"""Core Layer — pure domain logic: errors, validation rules, repository contracts.

Invariants:
    - Core never imports from api/, services/, repositories/ or infrastructure/
    - No IO in core; the current time is injectable wherever rules depend on it
"""
