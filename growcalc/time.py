from __future__ import annotations

from datetime import datetime

import pytz

from growcalc.config import timezone_name_from_env


# Keep timezone handling consistent across the project.
def local_timezone() -> pytz.BaseTzInfo:
    return pytz.timezone(timezone_name_from_env())


def now() -> datetime:
    return datetime.now(local_timezone())
