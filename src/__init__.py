"""
Core package for the Infoco management dashboard.

Submodules provide the in-memory data store, derived aggregates, the AI
analysis service and the user interface rendering helpers orchestrated by
the top-level `app.py`.
"""
