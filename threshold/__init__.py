"""
threshold: threshold union of vector clocks.

Tracks, per actor, the most recent event observed by at least ``t`` out
of a growing collection of observers, each reporting its progress as a
vector clock.
"""

__version__ = "0.1.0"
