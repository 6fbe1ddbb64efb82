"""
Bill Manager

An interactive command-line tool for keeping track of bills during a
session: add, view, update and remove named amounts from a numbered menu.

DESIGN PRINCIPLES:
1. An empty line always means "go back"
2. Nothing changes unless every prompt was answered
3. Every action is auditable
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Bill Manager Team"
