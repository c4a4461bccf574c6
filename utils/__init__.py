"""
utils/ - Shared Helpers
=======================
Logging, error types and the in-process cache.
"""
