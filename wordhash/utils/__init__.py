"""
Shared utility functions.

This subpackage includes:
- directory helpers
- lightweight logging helpers configured from config/word_hash.yaml.
"""
