"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (persons, medical records, fire stations).  The routers are
aggregated in ``router.py`` at the package level and then included in
the main application.
"""
