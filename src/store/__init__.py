"""Storage backend layer.

This module persists raw values under string keys.
It is the only layer that touches real storage.
"""
