"""Services Layer - orchestrates pure core logic around store IO.

Invariants:
    - Services receive collaborators (stores) as arguments; no global state
"""
