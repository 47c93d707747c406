"""
Request payload validation.

- fields: accepted field names derived from a schema
- decoder: strict decoding (unknown/mis-cased keys rejected before decoding)
- rules: rule registry used by the constraint validator
- constraints: declarative per-field constraint checks

Import public names from `payload_guard` rather than from these modules.
"""
