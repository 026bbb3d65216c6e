"""Skill Garden: gamified learning-community backend"""

__version__ = "1.0.0"
