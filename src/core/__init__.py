"""
Core value types, mathematical primitives, and invariants.

This package contains the four numeric value types (Complex, Vector3D,
Matrix, Fraction) and the shared numerical safeguards they rely on.
Nothing here performs I/O or keeps state between calls.
"""
