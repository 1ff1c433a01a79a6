"""
models/ - Domain Layer
======================
Plain dataclasses for table rows and startup configuration, plus the
pydantic schemas describing HTTP request bodies.
"""
