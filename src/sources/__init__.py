"""Data source layer.

This module defines the read/write capability, the terminal base store,
and the decorators that transform values between a caller and storage.
"""
