"""
models/ - Domain Models
=======================
Plain dataclasses for the entities the application stores.
Models hold no SQL; the repositories build them from database rows.
"""
