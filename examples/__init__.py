"""Example host applications for tagpack.

This package demonstrates library usage but is not part of the core API.
"""
