"""
Application package initializer.

The project is organised in layers: ``core`` holds configuration,
logging, the JSON document store and the exception types; ``schemas``
holds the pydantic models for persisted entities and query results;
``services`` contains the business logic (including the join helpers
that correlate persons, medical records and fire stations); and
``api`` exposes the HTTP routes.
"""

from .main import app  # noqa: F401
