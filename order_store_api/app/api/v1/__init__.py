"""
Version 1 of the Order Store API.
"""
