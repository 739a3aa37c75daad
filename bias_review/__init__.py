"""
Bias Review API: influence-map highlighting for the news-bias review dashboard.
"""

__version__ = "1.0.0"
