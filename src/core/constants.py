"""Core constants used across Strata modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".strata")
STORE_FILE_NAME = "store.json"
DEFAULT_TEXT_ENCODING = "utf-8"
DEFAULT_CIPHERTEXT_ENCODING = "latin-1"
PLAINTEXT_ENCODING = "utf-8"
BACKEND_MEMORY = "memory"
BACKEND_FILE = "file"
SUPPORTED_BACKENDS = (BACKEND_MEMORY, BACKEND_FILE)
DEFAULT_BACKEND = BACKEND_FILE
LAYER_ENCODING = "encoding"
LAYER_ENCRYPTION = "encryption"
SUPPORTED_LAYER_KINDS = (LAYER_ENCODING, LAYER_ENCRYPTION)
VALUE_KIND_TEXT = "text"
VALUE_KIND_BYTES = "bytes"
DEMO_STORAGE_KEY = "decorator"
DEMO_ENCRYPTION_KEY = "secret"
DEMO_PLAINTEXT = "Design Patterns"
