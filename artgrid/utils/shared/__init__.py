"""Shared utilities package.

JSON configuration manager and its categories.
"""
