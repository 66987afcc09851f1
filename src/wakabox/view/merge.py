# SPDX-License-Identifier: MIT

import re

from wakabox.configuration import BOX_FENCE, BOX_MARKER
from wakabox.log import get_logger

logger = get_logger(__name__)

# Greedy: runs from the opening marker to the last closing fence in the document
BOX_PATTERN = re.compile(re.escape(BOX_MARKER) + r"[\s\S]*" + re.escape(BOX_FENCE))


def merge_box(document: str, box: str) -> str:
    """
    Replace the rendered box inside ``document`` or append it.

    The box is appended verbatim, without a separating newline. Merging the
    same box twice gives the same document as merging it once.
    """
    if BOX_MARKER not in document:
        return document + box

    merged, count = BOX_PATTERN.subn(lambda _: box, document)
    if count == 0:
        logger.warning(
            "found an unterminated %s block, leaving the note untouched", BOX_MARKER
        )
        return document
    return merged
