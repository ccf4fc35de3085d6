"""Animated card movement along a line, one frame at a time."""

from __future__ import annotations

from typing import Callable, Optional

DEAL_SOUND = 6


def _byte(value: int) -> int:
    return value & 0xFF


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class CardMover:
    """Moves a card sprite from a start point to an end point over several frames."""

    HOLD_FRAMES = 3
    TRAVEL_FRAMES = 4
    PAUSE_FRAMES = 10

    def __init__(self, sound: Optional[Callable[[int], None]] = None) -> None:
        self._sound = sound
        self.x0 = self.y0 = self.x1 = self.y1 = 0
        self.frames_between = 0
        self.reset()

    def reset(self) -> None:
        """Clear all movement state."""
        self.x_progress = 0
        self.y_progress = 0
        self.n_steps = 0
        self.arrived = False
        self.skip_it = 0
        self.m_states = 0
        self.dx = 0
        self.dy = 0
        self.d = 0
        self.dl_state = False
        self.move_state = 0
        self.sp_x = 0
        self.sp_y = 0
        self.vram_x = 0
        self.vram_y = 0
        self.card_arrived = False
        self.allow_sprite = False

    def _play(self) -> None:
        if self._sound is not None:
            self._sound(DEAL_SOUND)

    def start(self, x0: int, y0: int, x1: int, y1: int, frames_between: int) -> None:
        """Set the endpoints and begin a new movement."""
        self.x0, self.y0, self.x1, self.y1 = x0, y0, x1, y1
        self.frames_between = frames_between
        self.move_state = 0
        self.dl_state = False
        self.card_arrived = False
        self.arrived = False

    def step(self) -> bool:
        """Advance the dealing animation by one frame; return True once the card has landed."""
        travel_end = self.HOLD_FRAMES + self.TRAVEL_FRAMES
        if self.move_state < self.HOLD_FRAMES:
            if self.move_state == 0:
                self._play()
            self.allow_sprite = True
            self.sp_x, self.sp_y = self.x0, self.y0
            self.move_state += 1
            return False
        if self.move_state < travel_end:
            for _ in range(self.frames_between):
                if self.x1 > self.x0:
                    if self.x1 - self.x0 >= self.y1 - self.y0:
                        self.move_rd()
                    else:
                        self.move_dr()
                elif self.x0 - self.x1 > self.y1 - self.y0:
                    self.move_ld()
                else:
                    self.move_dl()
            self.move_state += 1
            return False
        if self.move_state < travel_end + 1:
            self.sp_x, self.sp_y = self.x1, self.y1
            self.move_state += 1
            return False
        if self.move_state < travel_end + 2:
            self.vram_x = self.x1 >> 3
            self.vram_y = self.y1 >> 3
            self.move_state += 1
            return False
        if self.move_state < travel_end + max(self.PAUSE_FRAMES, 3):
            self.move_state += 1
            return False
        self.move_state = 0
        self.dl_state = False
        self.card_arrived = True
        self.allow_sprite = False
        return True

    def _init_line(self, dx: int, steep: bool) -> None:
        self.sp_x, self.sp_y = self.x0, self.y0
        self.dx = _byte(dx)
        self.dy = _byte(self.y1 - self.y0)
        self.d = (self.dx << 1) - self.dy if steep else (self.dy << 1) - self.dx
        self.dl_state = True

    def move_dl(self) -> None:
        """One Bresenham step, mostly down, drifting left."""
        if not self.dl_state:
            self._init_line(self.x0 - self.x1, steep=True)
        if self.d > 0:
            self.d += 2 * (self.dx - self.dy)
            self.sp_x = _byte(self.sp_x - 1)
        else:
            self.d += 2 * self.dx
        self.sp_y = _byte(self.sp_y + 1)

    def move_ld(self) -> None:
        """One Bresenham step, mostly left, drifting down."""
        if not self.dl_state:
            self._init_line(self.x0 - self.x1, steep=False)
        if self.d > 0:
            self.d -= self.dx << 1
            self.sp_y = _byte(self.sp_y + 1)
        self.d += self.dy << 1
        self.sp_x = _byte(self.sp_x - 1)

    def move_dr(self) -> None:
        """One Bresenham step, mostly down, drifting right."""
        if not self.dl_state:
            self._init_line(self.x1 - self.x0, steep=True)
        if self.d > 0:
            self.d += 2 * (self.dx - self.dy)
            self.sp_x = _byte(self.sp_x + 1)
        else:
            self.d += 2 * self.dx
        self.sp_y = _byte(self.sp_y + 1)

    def move_rd(self) -> None:
        """One Bresenham step, mostly right, drifting down."""
        if not self.dl_state:
            self._init_line(self.x1 - self.x0, steep=False)
        if self.d > 0:
            self.d -= self.dx << 1
            self.sp_y = _byte(self.sp_y + 1)
        self.d += self.dy << 1
        self.sp_x = _byte(self.sp_x + 1)

    def _quarter_move(self, y_sign: int) -> bool:
        if not self.m_states:
            self.x_progress = _byte(_trunc_div(self.x1 - self.x0, 4))
            self.y_progress = _byte(_trunc_div((self.y1 - self.y0) * y_sign, 4))
            self.sp_x, self.sp_y = self.x0, self.y0
            self.skip_it += 1
            if self.skip_it < 10:
                if self.skip_it == 1:
                    self._play()
                return self.arrived
            self.skip_it = 0
            self.m_states += 1
            return self.arrived
        self.skip_it += 1
        if self.skip_it < 2:
            return self.arrived
        self.skip_it = 0
        self.sp_x = _byte(self.sp_x + self.x_progress)
        self.sp_y = _byte(self.sp_y + y_sign * self.y_progress)
        self.n_steps += 1
        if self.n_steps == 4:
            self.sp_x, self.sp_y = self.x1, self.y1
            self.arrived = True
            self.n_steps = 0
            self.m_states = 0
        return self.arrived

    def dr_move(self) -> bool:
        """Advance a four-step move down and right; return True once arrived."""
        return self._quarter_move(1)

    def ur_move(self) -> bool:
        """Advance a four-step move up and right; return True once arrived."""
        return self._quarter_move(-1)