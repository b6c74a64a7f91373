"""
utils/ - Shared Helpers
=======================
Logging setup and date/time handling used across layers.
"""
