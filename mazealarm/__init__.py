"""Maze Alarm API Package — REST backend for the maze-challenge alarm device.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
