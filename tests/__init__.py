"""
Test suite for planar.

Contains:
- tests/unit/ : Unit tests for individual engines (values, kernels, topology,
                validity, metrics, overlay, derived geometry, facade, plotting)
"""
