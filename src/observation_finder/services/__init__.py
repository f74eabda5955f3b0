"""
Shared service utilities.

- http.py - pre-configured ``httpx.AsyncClient`` factory
"""
