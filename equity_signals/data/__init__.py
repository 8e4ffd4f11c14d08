"""
Data models and cleaning module.

Immutable price/volume series handed to the indicator engine, and the
cleaning step that turns raw acquisition samples into such series.
"""
