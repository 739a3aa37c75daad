"""
Command-line tools.
"""
