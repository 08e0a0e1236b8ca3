"""Widget plumbing around the table parser.

Submodules:
  config  -- WidgetSettings and environment defaults
  model   -- CsvContentModel, virtual-path resolution, index() action
"""
