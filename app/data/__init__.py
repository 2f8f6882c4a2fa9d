"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Stores are constructed explicitly and passed in; nothing connects at import time.
- No env var reads here (config-only).
"""
