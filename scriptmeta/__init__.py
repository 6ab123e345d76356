"""
scriptmeta — metadata blocks embedded in single-file scripts.
"""

__version__ = "0.1.0"
