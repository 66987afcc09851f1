# SPDX-License-Identifier: MIT

from dataclasses import dataclass


@dataclass
class SchedulerState:
    """Mutable polling state owned by the watch loop, one per process."""

    interval_counter: int = 0
