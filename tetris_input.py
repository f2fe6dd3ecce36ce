"""Input reduction: logical actions, horizontal auto-repeat, pygame key mapping"""
from dataclasses import dataclass
from typing import Iterable, Optional

import pygame


@dataclass
class InputState:
    move_left: bool = False
    move_right: bool = False
    soft_drop: bool = False
    rotate: bool = False
    rotate_ccw: bool = False

    @property
    def horizontal(self) -> int:
        # Left wins when both are held.
        if self.move_left:
            return -1
        if self.move_right:
            return 1
        return 0


class HorizontalRepeat:
    """Fires once on press, then every ``interval`` time-units while held.

    Releasing, or switching direction, clears the timer so the next press
    fires immediately again.
    """

    def __init__(self, interval: float):
        self.interval = interval
        self.dir = 0
        self.last: Optional[float] = None

    def reset(self):
        self.dir = 0
        self.last = None

    def shift_timer(self, delta: float):
        if self.last is not None:
            self.last += delta

    def update(self, now: float, direction: int) -> int:
        if direction != self.dir:
            self.dir = direction
            self.last = None
        if self.dir == 0:
            return 0
        if self.last is None or now - self.last >= self.interval:
            self.last = now
            return self.dir
        return 0


LEFT_KEYS = (pygame.K_LEFT,)
RIGHT_KEYS = (pygame.K_RIGHT,)
DOWN_KEYS = (pygame.K_DOWN,)
ROTATE_KEYS = (pygame.K_UP, pygame.K_x)
ROTATE_CCW_KEYS = (pygame.K_z,)


class KeyboardInput:
    """Turns pygame events + key state into one InputState per frame.

    Movement and soft drop follow the held keys; rotation is edge-triggered,
    set only on the frame its KEYDOWN arrives.
    """

    def __init__(self):
        self.state = InputState()

    def poll(self, events: Iterable[pygame.event.Event], pressed) -> InputState:
        rotate = rotate_ccw = False
        for e in events:
            if e.type != pygame.KEYDOWN:
                continue
            if e.key in ROTATE_KEYS: rotate = True
            if e.key in ROTATE_CCW_KEYS: rotate_ccw = True
        self.state = InputState(
            move_left=any(pressed[k] for k in LEFT_KEYS),
            move_right=any(pressed[k] for k in RIGHT_KEYS),
            soft_drop=any(pressed[k] for k in DOWN_KEYS),
            rotate=rotate,
            rotate_ccw=rotate_ccw,
        )
        return self.state
