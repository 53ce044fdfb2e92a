"""
Text processing and feature extraction utilities.

This subpackage includes:
- clean and raw tokenization policies
- token validity rules (stopwords, length, mixed alphanumerics)
- Snowball stemming adapters
- the word-hash pipeline and DictVectorizer helpers for classifiers.
"""
