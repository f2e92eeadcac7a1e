"""Document storage layer.

This module persists typed XML, JSON, and text documents beneath a
resolved storage root and maintains its directory tree.
"""
