# SPDX-License-Identifier: MIT

import pendulum

from wakabox.configuration import Configuration
from wakabox.model.scheduler import SchedulerState

TICK_SECONDS = 60


def should_fetch(
    state: SchedulerState, config: Configuration, now: pendulum.DateTime
) -> bool:
    """
    Decide whether this one-minute tick should refresh the daily note.

    Interval mode counts ticks and fires once the counter reaches
    ``update_interval_minutes``. Daily batch mode fires only on the
    configured local hour and minute.
    """
    if config["enable_daily_batch_mode"]:
        local_now = now.in_tz("local")
        return (
            local_now.hour == config["batch_update_hours"]
            and local_now.minute == config["batch_update_minutes"]
        )

    fire = False
    if state.interval_counter >= config["update_interval_minutes"]:
        state.interval_counter = 0
        fire = True
    state.interval_counter += 1
    return fire
