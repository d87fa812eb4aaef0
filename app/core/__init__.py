"""
Core utilities for the location discovery service: geospatial math,
query validation, error handling, logging and dependency wiring.
"""
