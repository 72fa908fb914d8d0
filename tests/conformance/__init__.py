"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the token engine.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. conservation.py - Supply equals the sum of balances and never exceeds the ceiling
2. atomicity.py - A rejected call leaves state and audit trails untouched
3. determinism.py - Replaying the call log reproduces the same state
4. serialization.py - Concurrent callers never break the supply invariants

These tests use hypothesis for property-based testing.
"""
