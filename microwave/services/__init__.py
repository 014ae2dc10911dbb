"""Services Layer — orchestration between the API and the pure core.

Invariants:
    - Services hold no domain rules; they sequence core calls, locks, and logging
    - Only snapshots leave this layer

Design Decisions:
    - One service per aggregate (sessions, catalog) plus the tick driver
"""
