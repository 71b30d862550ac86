"""
Utility helpers: JSON value serialization
"""
