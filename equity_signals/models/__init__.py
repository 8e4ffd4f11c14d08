"""
Value objects module.

Immutable indicator snapshots and trading signals passed between the
indicator engine, the rule evaluators and the presentation layer.
"""
