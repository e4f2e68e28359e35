"""
Core business logic modules for PivotKarir.

Submodules:
- matching: ranking and the comparison session
"""
