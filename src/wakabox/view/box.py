# SPDX-License-Identifier: MIT

import math
from decimal import Decimal

from wakabox.configuration import BOX_FENCE, BOX_MARKER
from wakabox.model.summary import Language, Summary

BAR_SYMBOLS = "░▏▎▍▌▋▊▉█"
BAR_WIDTH = 20
COLUMN_PADDING = " " * 5
DEFAULT_MAX_ROWS = 6


def generate_bar_chart(percent: float, width: int = BAR_WIDTH) -> str:
    """
    Draw ``percent`` (0-100) across ``width`` cells at eighth-of-a-cell
    resolution. Values of 100 and above saturate to a full bar.
    """
    empty = BAR_SYMBOLS[0]
    full = BAR_SYMBOLS[8]

    eighths = max(math.floor(width * 8 * percent / 100), 0)
    full_cells = eighths // 8
    if full_cells >= width:
        return full * width

    partial = BAR_SYMBOLS[eighths % 8]
    return (full * full_cells + partial).ljust(width, empty)


def format_percent(percent: float) -> str:
    """
    Print a percentage the way a JavaScript number prints.

    Whole values drop the decimal point (50, not 50.0). Tiny values stay in
    plain decimal down to 1e-6 and use a bare exponent below that (1e-7,
    not 1e-07).
    """
    value = float(percent)
    if value.is_integer():
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    if int(exponent) >= -6:
        return format(Decimal(text), "f")
    return f"{mantissa}e{int(exponent)}"


def _select_languages(summary: Summary, max_rows: int) -> list[Language]:
    if len(summary["data"]) == 0:
        return []
    # Admits indices 0..max_rows inclusive, so the default yields 7 rows
    return summary["data"][0]["languages"][: max_rows + 1]


def render_box(summary: Summary, max_rows: int = DEFAULT_MAX_ROWS) -> str:
    languages = _select_languages(summary, max_rows)

    max_name_length = 0
    max_text_length = 0
    max_percent_length = 0
    for language in languages:
        max_name_length = max(max_name_length, len(language["name"]))
        max_text_length = max(max_text_length, len(language["text"]))
        max_percent_length = max(
            max_percent_length, len(format_percent(language["percent"]))
        )

    box = BOX_MARKER + "\n"
    for language in languages:
        name = language["name"].ljust(max_name_length)
        text = language["text"].ljust(max_text_length)
        percent = format_percent(language["percent"]).rjust(max_percent_length)
        bar = generate_bar_chart(language["percent"])
        box += COLUMN_PADDING.join([name, text, bar, percent]) + " %\n"
    box += BOX_FENCE
    return box
