"""
Test suite for custody-gate

Contains:
- tests/unit/          : Unit tests for primitives, validators, signers, dispatch
"""
