"""
Logging utilities for the Saint Central backend.

This package provides:
- Structured JSON logging with correlation IDs
- Sensitive data filtering for PII protection
"""
