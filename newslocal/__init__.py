"""
NewsLocal Backend

A FastAPI backend for the NewsLocal mobile application.
Provides headline pagination, category filtering, search, curated
selections (breaking, trending, recommended) and engagement counters.
"""

__version__ = "1.0.0"
