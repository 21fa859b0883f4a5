"""
API package containing the HTTP routes.

The top‑level ``router`` defined in ``router.py`` includes all of the
domain‑specific routers from ``endpoints``.
"""
