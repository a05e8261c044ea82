"""GUI adapter layer.

This package provides thin Qt-shaped adapters over engine objects.

Notes
-----
Adapters exist to:
- keep GUI code free of persistence details,
- turn engine observable lists into Qt item models.
"""
