"""
utils/ - Shared helpers: logging setup and money conversion.
"""
