"""
Configuration module.

Default indicator and rule parameters, YAML-backed per-symbol overrides
and parameter validation.
"""
