"""
Rust-specific modules for check-keyword.

This package contains Rust language data:
- keywords: Keyword lists per edition
"""
