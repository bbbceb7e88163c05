"""
Test suite for statekit.

Focus areas:
- Reference stability of combined state
- Deferred reducer shape errors
- Composition order
- Middleware ordering and construction guards
"""
