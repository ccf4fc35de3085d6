"""Options screen: music and sound-effect volume sliders."""

from __future__ import annotations

MAX_VOLUME = 115
_SLIDER_OFFSET = 171 - 63


class Options:
    """Volume settings navigated with a two-row, two-column selector."""

    def __init__(self, music_volume: int = 63, sfx_volume: int = 63) -> None:
        for volume in (music_volume, sfx_volume):
            if not 0 <= volume <= MAX_VOLUME:
                raise ValueError(f"volume must be between 0 and {MAX_VOLUME}")
        self.music_volume = music_volume
        self.sfx_volume = sfx_volume
        self.music_slider_x = _SLIDER_OFFSET + music_volume
        self.sfx_slider_x = _SLIDER_OFFSET + sfx_volume
        self.music_crossed = music_volume == 0
        self.sfx_crossed = sfx_volume == 0
        self.row = 0
        self.column = 0
        self.music_playing = False

    def move_up(self) -> None:
        """Move the selector up; reaching the music row restarts the preview music."""
        if self.row:
            self.row -= 1
        if not self.row:
            self.music_playing = True

    def move_down(self) -> None:
        """Move the selector down to the sound-effect row, stopping the music."""
        self.row = min(self.row + 1, 1)
        self.music_playing = False

    def move_right(self) -> None:
        """Select the increase button."""
        self.column = 1

    def move_left(self) -> None:
        """Select the decrease button."""
        self.column = 0

    def adjust(self) -> int:
        """Apply one step to the selected slider and return that channel's volume."""
        if self.row == 0:
            if self.column:
                if self.music_volume < MAX_VOLUME:
                    self.music_slider_x += 1
                    self.music_volume += 1
                    if self.music_volume == 1:
                        self.music_crossed = False
            elif self.music_volume:
                self.music_slider_x -= 1
                self.music_volume -= 1
            else:
                self.music_crossed = True
            return self.music_volume
        if self.column:
            if self.sfx_volume < MAX_VOLUME:
                self.sfx_slider_x += 1
                self.sfx_volume += 1
                if self.sfx_volume == 1:
                    self.sfx_crossed = False
        elif self.sfx_volume:
            self.sfx_slider_x -= 1
            self.sfx_volume -= 1
        else:
            self.sfx_crossed = True
        return self.sfx_volume

    def selector_rect(self) -> tuple[int, int, int, int]:
        """Return the selector's (x, y, width, height)."""
        x = 48 if self.column else 19
        y = 128 if self.row else 99
        return x, y, 15, 15