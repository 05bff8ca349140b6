"""Example scripts for xzgrid.

This package demonstrates library usage but is not part of the core API.
"""
