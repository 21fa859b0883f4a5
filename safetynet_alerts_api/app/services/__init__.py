"""
Service layer abstraction.

Each service encapsulates business logic for one collection of the
data document.  Services read and write the document through the
store in ``core.store`` and never deal with HTTP concerns; failures
are raised as the exceptions from ``core.exceptions``.
"""
