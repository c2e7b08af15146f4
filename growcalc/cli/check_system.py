#!/usr/bin/env python3
"""
System check script for growcalc.
Verifies Python dependencies and the Redis connection used by the web app.
"""

from __future__ import annotations

import re
import sys
from importlib import metadata

DISTRIBUTION = "growcalc"
RUNTIME_PACKAGES = ("flask", "redis", "pytz")


def required_packages() -> list[str]:
    """
    Runtime requirements declared by the installed distribution, or the
    known runtime set when growcalc runs from a source checkout.
    """
    try:
        requirements = metadata.requires(DISTRIBUTION) or []
    except metadata.PackageNotFoundError:
        return list(RUNTIME_PACKAGES)
    return [
        re.split(r"[\s<>=!~;\[(]", req, maxsplit=1)[0]
        for req in requirements
        if "extra ==" not in req
    ]


def check_python_package(distribution: str) -> bool:
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        print(f"❌ {distribution} is NOT installed")
        return False
    print(f"✅ {distribution} {version}")
    return True


def check_redis() -> bool:
    """Check if Redis is running."""
    try:
        import redis

        from growcalc.config import redis_config_from_env

        cfg = redis_config_from_env()
        client = redis.Redis(host=cfg.host, port=cfg.port, db=cfg.db)
        client.ping()
        print(f"✅ Redis is running and accessible at {cfg.host}:{cfg.port}")
        return True
    except Exception as e:
        print(f"❌ Redis is NOT accessible: {e}")
        print("   Start with: docker run -d -p 6379:6379 redis")
        return False


def main() -> int:
    print("=" * 50)
    print("growcalc System Check")
    print("=" * 50)
    print()

    all_ok = True

    print("Checking Python packages...")
    for package in required_packages():
        all_ok &= check_python_package(package)
    print()

    print("Checking services...")
    all_ok &= check_redis()
    print()

    print("=" * 50)
    if all_ok:
        print("✅ All checks passed! System is ready.")
        print()
        print("Next steps:")
        print("  growcalc-web")
        return 0

    print("⚠️  Some checks failed. Please fix the issues above.")
    print()
    print("Common solutions:")
    print("  - Install dependencies: pip install -e .")
    print("  - Start Redis and check GROWCALC_REDIS_HOST / GROWCALC_REDIS_PORT")
    return 1


if __name__ == "__main__":
    sys.exit(main())
