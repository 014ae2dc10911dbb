"""Infrastructure — file persistence and observability adapters.

Invariants:
    - Adapters implement core protocols; core never imports from here
"""
