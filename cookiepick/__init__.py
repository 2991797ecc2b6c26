"""
cookiepick - print cookies from your local browser stores as JSON or curl.
"""

__version__ = "1.0.0"
