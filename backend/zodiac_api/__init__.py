"""Zodiac API Package - sign classification service with a bounded entry log.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
