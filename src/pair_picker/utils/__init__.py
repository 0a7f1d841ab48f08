"""
Utilities for logging and terminal presentation.
"""
