"""
models/ - Domain Models
=======================
Entities with their field-level invariants. Every mutation goes through a
validating setter, so an invalid entity can never be observed.
"""
