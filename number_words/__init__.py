"""
Number Words — English phrases for numbers, money, percents, degrees and dates.

Architecture: Normalize input → Split fraction → Spell magnitudes → Assemble phrase
Philosophy:  Formatting never throws inline; callers get a phrase or an error value.
"""

__version__ = "1.0.0"
