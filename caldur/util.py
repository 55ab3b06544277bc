"""Utility constants for caldur.

Time unit constants represent fixed durations in seconds. They describe
elapsed time only; calendar units (months, years) have no fixed length and
are deliberately absent.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
