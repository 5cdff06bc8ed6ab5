"""
Core infrastructure: paths, configuration, logging, validation, exceptions.
"""
