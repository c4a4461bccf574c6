"""
services/ - Business Logic Layer
================================
Services combine repositories and the cache into the operations callers use.
"""
