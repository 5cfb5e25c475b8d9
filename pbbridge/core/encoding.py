"""UTF-8 encoding constants for the adapter wire protocol."""

# Encoding constants
ENCODING = "utf-8"
ENCODING_ERRORS = "replace"  # Preserve data, mark corruption
