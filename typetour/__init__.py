"""
typetour - Interface & Enum Explorer

An interactive terminal tour of Python interfaces and enums.
Walk through every topic as a guided tutorial, or browse and run examples directly.
"""

__version__ = "0.1.0"
