"""
Version 1 of the API.

This subpackage bundles the candidate and vote endpoints.
"""
