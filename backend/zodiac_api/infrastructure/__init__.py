"""Infrastructure Layer - file persistence, rate limiting, logging setup.

Invariants:
    - Infrastructure may import core/ types and pure helpers, never api/ or services/
    - IO failures mapped to core/errors.py types before leaving this layer
"""
