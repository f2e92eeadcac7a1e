"""Storage root resolution layer.

This module classifies the host platform and derives per-application
storage roots. It performs no filesystem writes.
"""
