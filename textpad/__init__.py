"""
Module: textpad

A lightweight single-window plain-text editor.
"""

__version__ = "1.0.0"
