"""
Utility functions module.

Time Semantics:
- The trading session is defined in the exchange's local time zone
- Callers inject "now"; wall-clock time is read only by explicit helpers
- Naive datetimes are taken to be in the exchange's local time already
"""
