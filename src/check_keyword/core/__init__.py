"""
Core modules for check-keyword.

This package contains the classification logic:
- status: KeywordStatus and its kinds and restrictions
- classifier: Keyword table lookups and the safe-name transform
"""
