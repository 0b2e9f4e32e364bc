"""API Layer — FastAPI routes, authentication and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error bodies are {"error": "<message>"}

Design Decisions:
    - Thin routes delegate to services
"""
