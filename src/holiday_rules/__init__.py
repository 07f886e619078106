"""
Holiday rules for countries and regions.

Computes public and observance holidays per jurisdiction and year from
declarative provider definitions, and serves them over a small Flask API.
"""

__version__ = "1.0.0"
