"""Configuration, logging, exceptions and the JSON document store."""
