"""
Pydantic schema definitions.

Entity models (persons, medical records, fire stations) double as the
persisted document format and as request bodies.  Query result models
are kept next to the entity they are centred on.
"""
