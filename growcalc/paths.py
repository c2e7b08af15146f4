from __future__ import annotations

from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

WEB_DIR = PACKAGE_DIR / "web"
TEMPLATES_DIR = WEB_DIR / "templates"
