"""
Headless host - animation-frame scheduling and keyboard delivery without a display.

Stands in for a browser or windowing toolkit: callbacks registered with
request_animation_frame() run once per simulated display refresh and receive
a monotonically increasing timestamp in milliseconds.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 1000.0 / 60  # 60 Hz display


@dataclass
class KeyEvent:
    key_code: int
    propagation_stopped: bool = False

    def stop_propagation(self):
        self.propagation_stopped = True


FrameCallback = Callable[[float], None]
KeyListener = Callable[[KeyEvent], None]


class HeadlessHost:
    """
    Simulated display clock.

    Each step() advances the clock by one refresh interval, delivers the key
    presses scheduled up to that time, then runs every animation callback
    that was pending when the step began.
    """

    def __init__(self, refresh_interval: float = DEFAULT_REFRESH_INTERVAL, start_time: float = 0.0):
        if refresh_interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {refresh_interval}.")
        self.refresh_interval = refresh_interval
        self.now = start_time
        self.frames = 0

        self._callbacks: Dict[int, FrameCallback] = {}
        self._handles = itertools.count(1)
        self._key_listeners: List[KeyListener] = []
        self._scheduled_keys: List[Tuple[float, int, int]] = []
        self._key_seq = itertools.count()

        # Hooks run around every refresh, e.g. autopilots and frame recorders
        self.before_frame: List[Callable[[float], None]] = []
        self.after_frame: List[Callable[[float], None]] = []

    # -- animation frames --

    def request_animation_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._callbacks[handle] = callback
        return handle

    def cancel_animation_frame(self, handle: Optional[int]):
        if handle is not None:
            self._callbacks.pop(handle, None)

    @property
    def has_pending_frames(self) -> bool:
        return bool(self._callbacks)

    # -- keyboard --

    def add_key_listener(self, listener: KeyListener):
        if listener not in self._key_listeners:
            self._key_listeners.append(listener)

    def remove_key_listener(self, listener: KeyListener):
        if listener in self._key_listeners:
            self._key_listeners.remove(listener)

    def press(self, key_code: int) -> KeyEvent:
        """Deliver a keydown event to every listener right away."""
        event = KeyEvent(key_code)
        for listener in list(self._key_listeners):
            listener(event)
        return event

    def schedule_key(self, timestamp: float, key_code: int):
        """Queue a keydown to be delivered before the first frame at or after `timestamp`."""
        heapq.heappush(self._scheduled_keys, (timestamp, next(self._key_seq), key_code))

    # -- clock --

    def step(self):
        """Run one display refresh."""
        self.now += self.refresh_interval
        self.frames += 1

        while self._scheduled_keys and self._scheduled_keys[0][0] <= self.now:
            _, _, key_code = heapq.heappop(self._scheduled_keys)
            self.press(key_code)

        for hook in list(self.before_frame):
            hook(self.now)

        pending = self._callbacks
        self._callbacks = {}
        for callback in pending.values():
            callback(self.now)

        for hook in list(self.after_frame):
            hook(self.now)

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Step until no animation callback is pending or `max_frames` refreshes ran.

        Returns:
            Number of refreshes run by this call.
        """
        ran = 0
        while self.has_pending_frames:
            if max_frames is not None and ran >= max_frames:
                logger.info(f"Stopping host after {ran} frames (limit reached)")
                break
            self.step()
            ran += 1
        return ran
