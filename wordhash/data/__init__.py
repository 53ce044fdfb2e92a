"""
Static data and configuration.

This subpackage provides:
- read-only stopword tables, one per supported language code
- loading of config/word_hash.yaml and resolution of per-call options.
"""
