"""
Numerical core: psychrometrics, light, stage classification, target solving.

Everything here is pure and import-safe; no Flask or Redis imports.
"""

from __future__ import annotations
