"""Value transforms.

This package holds the byte cipher and text codec helpers that
pipeline decorators apply to values in transit.
"""
