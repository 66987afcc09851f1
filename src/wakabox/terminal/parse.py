# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from wakabox import time


def parse_date(date_param: Optional[str]) -> Optional[str]:
    """Accept YYYY-MM-DD only, as well as today/t and yesterday/y."""
    if date_param is None:
        return None

    if date_param in ("today", "t"):
        return time.today_local_date_str()
    if date_param in ("yesterday", "y"):
        return time.yesterday_local_date_str()

    try:
        return time.normalize_date_str(date_param)
    except ValueError:
        raise typer.BadParameter(
            f"Invalid date format. Use YYYY-MM-DD, got '{date_param}'"
        )
