"""Core type definitions."""

from typing import NewType

# Canonical route pathname (e.g., "/", "/guide/getting-started")
# Distinct from filesystem paths to catch type mismatches
URLPath = NewType("URLPath", str)
