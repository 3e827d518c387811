"""
Test suite for the radiopharmaceutical production core

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests (decay, scheduling, lifecycles)
"""
