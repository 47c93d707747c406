"""
Pydantic schemas for the demo API.

Request schemas declare their constraints with `Rules` metadata and default
every field to its zero value, so that presence is judged by the constraint
validator rather than by decoding.
"""
