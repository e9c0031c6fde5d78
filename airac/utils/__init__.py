"""
Utility helpers for the airac library.
"""
