"""
Movie Catalog Manager application package.

This package contains the Streamlit UI, the REST API client for the movie
backend, the movie schemas, and shared utilities.
"""

__version__ = "1.0.0"
