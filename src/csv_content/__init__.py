"""CSV content widget: parse a CSV file into a normalised grid for rendering.

Subpackages:
  table   -- CSV reading, cell classification, pydantic schema, table building
  widget  -- widget settings and the content model consumed by the renderer
"""
