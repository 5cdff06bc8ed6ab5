"""
Utilities package: terminal charts and numeric helpers.
"""
