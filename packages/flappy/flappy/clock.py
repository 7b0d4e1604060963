"""Frame clock for the display-driven loop."""


class FrameClock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._interval = 1.0 / fps
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
