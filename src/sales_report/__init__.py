"""
Sales Report

Builds salesperson and product rankings from flat sales files.
"""

__version__ = "1.0.0"
