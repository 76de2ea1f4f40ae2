"""
utils/ - Shared helpers: logging, errors and message chunking.
"""
