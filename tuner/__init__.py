"""
Radio Tuner

Web control surface for a radio driven by an external command-line program.
"""

__version__ = "1.0.0"
