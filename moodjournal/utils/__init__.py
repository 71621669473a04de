"""
Shared utilities for moodjournal.
"""
