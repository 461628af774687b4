"""Persistent ``key=value`` settings, including window and monitor placement."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")

DEFAULT_SETTINGS_FILE = "resources/settings.cfg"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_X = 100
DEFAULT_Y = 100

_HEADER = "# CrownFlame 2D Game Engine Settings\n# This file is automatically generated\n\n"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)


@dataclass(frozen=True)
class WindowGeometry:
    """Size and position of a window on the desktop."""

    width: int
    height: int
    x: int
    y: int


@dataclass(frozen=True)
class MonitorInfo:
    """Position of a monitor on the desktop and the size of its video mode."""

    x: int
    y: int
    width: int
    height: int


def best_monitor_index(window: WindowGeometry, monitors: Sequence[MonitorInfo]) -> int:
    """Index of the monitor the window overlaps most, or -1 if it overlaps none."""
    best = -1
    max_overlap = 0
    for index, monitor in enumerate(monitors):
        left = max(window.x, monitor.x)
        top = max(window.y, monitor.y)
        right = min(window.x + window.width, monitor.x + monitor.width)
        bottom = min(window.y + window.height, monitor.y + monitor.height)
        if right > left and bottom > top:
            area = (right - left) * (bottom - top)
            if area > max_overlap:
                max_overlap = area
                best = index
    return best


def _to_string(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


def _from_string(text: str, default: T) -> T:
    if isinstance(default, bool):
        if text in ("true", "1"):
            return True  # type: ignore[return-value]
        if text in ("false", "0"):
            return False  # type: ignore[return-value]
        return default
    if isinstance(default, int):
        match = _INT_PREFIX.match(text)
        return int(match.group(1)) if match else default  # type: ignore[return-value]
    if isinstance(default, float):
        match = _FLOAT_PREFIX.match(text)
        return float(match.group(1)) if match else default  # type: ignore[return-value]
    if isinstance(default, str):
        words = text.split()
        return words[0] if words else default  # type: ignore[return-value]
    return default


class Settings:
    """Settings backed by a text file; loaded on creation, saved on ``save`` or exit."""

    def __init__(self, filename: str | os.PathLike[str] = DEFAULT_SETTINGS_FILE) -> None:
        self.path = Path(filename)
        self._values: dict[str, str] = {}
        self.load()

    def __enter__(self) -> Settings:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def _create_defaults(self) -> None:
        self.set("window_width", DEFAULT_WIDTH)
        self.set("window_height", DEFAULT_HEIGHT)
        self.set("window_x", DEFAULT_X)
        self.set("window_y", DEFAULT_Y)
        self.set("last_monitor_index", -1)
        self.set("first_run", True)

    def _load_from_file(self) -> bool:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return False
        self._values.clear()
        for line in text.split("\n"):
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            self._values[key.strip(" \t")] = value.strip(" \t")
        return True

    def load(self) -> None:
        """Read the file; if it cannot be read, write one with the defaults."""
        if not self._load_from_file():
            self._create_defaults()
            self.save()

    def save(self) -> None:
        """Write all settings, sorted by key, creating the directory if needed."""
        if self.path.parent != Path(""):
            self.path.parent.mkdir(parents=True, exist_ok=True)
        body = "".join(f"{key}={value}\n" for key, value in sorted(self._values.items()))
        self.path.write_text(_HEADER + body, encoding="utf-8")

    def set(self, key: str, value: object) -> None:
        self._values[key] = _to_string(value)

    def get(self, key: str, default: T) -> T:
        """The value for ``key`` converted to the type of ``default``."""
        text = self._values.get(key)
        if text is None:
            return default
        return _from_string(text, default)

    def save_window_settings(self, width: int, height: int, x: int, y: int) -> None:
        self.set("window_width", width)
        self.set("window_height", height)
        self.set("window_x", x)
        self.set("window_y", y)

    def window_settings(self) -> WindowGeometry:
        return WindowGeometry(
            self.get("window_width", DEFAULT_WIDTH),
            self.get("window_height", DEFAULT_HEIGHT),
            self.get("window_x", DEFAULT_X),
            self.get("window_y", DEFAULT_Y),
        )

    def has_window_settings(self) -> bool:
        return "window_width" in self._values

    def last_monitor_index(self) -> int:
        return self.get("last_monitor_index", -1)

    def set_last_monitor_index(self, index: int) -> None:
        self.set("last_monitor_index", index)

    def save_monitor_settings(
        self, window: WindowGeometry, monitors: Sequence[MonitorInfo]
    ) -> int:
        """Remember the window and the monitor it is mostly on; return that index."""
        index = best_monitor_index(window, monitors)
        self.set_last_monitor_index(index)
        self.save_window_settings(window.width, window.height, window.x, window.y)
        return index

    def restore_monitor_settings(
        self, monitors: Sequence[MonitorInfo]
    ) -> WindowGeometry | None:
        """Where to put the window, or None to leave placement to the system.

        The first call after the settings are created only clears the
        ``first_run`` flag and returns None.
        """
        last = self.last_monitor_index()
        if self.get("first_run", True) or last == -1:
            self.set("first_run", False)
            return None
        if not monitors:
            raise ValueError("no monitors to restore the window onto")
        if not 0 <= last < len(monitors):
            last = 0
        monitor = monitors[last]

        if self.has_window_settings():
            saved = self.window_settings()
            width, height, x, y = saved.width, saved.height, saved.x, saved.y
        else:
            width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
            x = monitor.x + (monitor.width - width) // 2
            y = monitor.y + (monitor.height - height) // 2

        x = max(monitor.x, min(x, monitor.x + monitor.width - width))
        y = max(monitor.y, min(y, monitor.y + monitor.height - height))
        return WindowGeometry(width, height, x, y)