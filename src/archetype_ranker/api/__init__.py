"""
HTTP API for the archetype ranker.

Usage:
    uvicorn archetype_ranker.api.main:app
"""
