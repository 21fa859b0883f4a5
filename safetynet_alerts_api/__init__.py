"""
Top‑level package for the SafetyNet Alerts API.

This file makes ``safetynet_alerts_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``safetynet_alerts_api.app.main``.  The bundled ``data.json``
document lives next to this file and is used as the default data
source when ``DATA_FILE`` is not set.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
