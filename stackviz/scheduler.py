#!/usr/bin/env python3

"""
One-Shot Timer Scheduler

Transient effects (block shakes, glows, toast expiry) need to undo themselves
a moment after they start.  Rather than using threads, callbacks are queued
here with a due time, and the main loop calls run_due() every frame to fire
whatever has expired.  This keeps every callback on the main thread.

Timers are never cancelled, and there is no ordering promise between timers
falling due in the same frame beyond their due times.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import heapq
from itertools import count
from time import perf_counter


class Scheduler:
    def __init__(self, clock=perf_counter):
        self.clock = clock
        self.timers = []
        self.sequence = count()  # Tie-breaker, so callbacks themselves are never compared

    def call_later(self, delay, callback):
        heapq.heappush(self.timers, (self.clock() + delay, next(self.sequence), callback))

    def run_due(self, now=None):
        if now is None:
            now = self.clock()

        fired = 0

        # Callbacks may schedule more timers, which will be picked up here if they are already due
        while self.timers and self.timers[0][0] <= now:
            _, _, callback = heapq.heappop(self.timers)
            callback()
            fired += 1

        return fired

    def pending(self):
        return len(self.timers)
