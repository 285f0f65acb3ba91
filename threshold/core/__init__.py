"""
Core data structures for threshold unions.

Contains the threshold multiset, the vector clock value type, the
threshold clock that combines them per actor, and the threshold set
over arbitrary elements.
"""
