"""
Output modules for check-keyword.

This package contains output handling:
- report: Text and JSON reports of converted names
"""
