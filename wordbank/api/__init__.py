"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses, except the CSV export

Design Decisions:
    - Thin routes delegate to core/ for every rule and to the codec for every byte of CSV
"""
