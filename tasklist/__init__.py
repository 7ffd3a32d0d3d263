"""
tasklist - a terminal task list with priorities.
"""

__version__ = "0.1.0"
