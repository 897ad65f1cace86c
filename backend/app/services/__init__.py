"""Services Layer — request handlers per resource, plus the async lookup guards.

Invariants:
    - One handler class per resource; collaborators (repositories, logger) injected via __init__
    - Handlers raise core/errors.py failures and never build HTTP responses

Design Decisions:
    - One handler file per resource for locality
"""
