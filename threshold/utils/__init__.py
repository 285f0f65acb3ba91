"""
Utilities for threshold: structured logging and clock file reading.
"""
