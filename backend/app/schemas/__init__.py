"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas render ORM records (from_attributes); request bodies are validated by
      core/validate_fields.py so every rejection carries its field-specific message

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
