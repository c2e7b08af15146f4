"""
Growcalc package.

VPD / DLI calculator for controlled-agriculture growers. The numerical core
lives in `growcalc.core`; `growcalc.web` and `growcalc.cli` are thin callers.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
