"""
Hello Service: a plain-text greeting over HTTP, built on FastAPI.
"""

__version__ = "1.0.0"
