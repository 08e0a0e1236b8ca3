"""CSV parsing and table normalisation.

Submodules:
  patterns     -- compiled regex patterns and string constants
  reader       -- logical-line reader, field splitting, field unescaping
  classifiers  -- comment stripping, marker matching, header detection
  schema       -- Column / Row / Table Pydantic models
  normalize    -- pad rows to a uniform column count
  pipeline     -- build_table() entry point
"""
