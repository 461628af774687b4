"""Timing and overlay geometry for animated scene transitions."""

from __future__ import annotations

from dataclasses import dataclass, field

from crownflame.scene_data import Color, SceneTransition, TransitionType, Vec2

Rect = tuple[float, float, float, float]

_SLIDES = frozenset(
    {
        TransitionType.SLIDE_LEFT,
        TransitionType.SLIDE_RIGHT,
        TransitionType.SLIDE_UP,
        TransitionType.SLIDE_DOWN,
    }
)


def fade_alpha(progress: float) -> float:
    """Overlay opacity: rises to full at the midpoint, then falls back."""
    if progress < 0.5:
        return progress * 2.0
    return (1.0 - progress) * 2.0


def slide_offset(
    transition_type: TransitionType,
    progress: float,
    screen_width: float,
    screen_height: float,
) -> Vec2:
    """How far a sliding overlay has moved at the given progress."""
    if transition_type is TransitionType.SLIDE_LEFT:
        return (-screen_width * progress, 0.0)
    if transition_type is TransitionType.SLIDE_RIGHT:
        return (screen_width * progress, 0.0)
    if transition_type is TransitionType.SLIDE_UP:
        return (0.0, -screen_height * progress)
    if transition_type is TransitionType.SLIDE_DOWN:
        return (0.0, screen_height * progress)
    return (0.0, 0.0)


@dataclass
class TransitionState:
    """Progress of one running transition."""

    transition: SceneTransition = field(default_factory=SceneTransition)
    timer: float = 0.0
    progress: float = 0.0

    def update(self, delta_time: float) -> bool:
        """Advance the timer; return True once the transition has finished."""
        self.timer += delta_time
        duration = self.transition.duration
        self.progress = self.timer / duration if duration > 0 else 1.0
        if self.progress >= 1.0:
            self.progress = 1.0
            return True
        return False

    def fade_alpha(self) -> float:
        return fade_alpha(self.progress)

    def overlay(
        self, screen_width: float, screen_height: float
    ) -> tuple[Rect, Color] | None:
        """The rectangle and colour to draw over the scene, if any."""
        kind = self.transition.type
        r, g, b, _ = self.transition.fade_color
        if kind is TransitionType.FADE_TO_BLACK:
            return (0.0, 0.0, screen_width, screen_height), (r, g, b, self.fade_alpha())
        if kind in _SLIDES:
            ox, oy = slide_offset(kind, self.progress, screen_width, screen_height)
            return (ox, oy, screen_width, screen_height), (r, g, b, 0.8 * self.progress)
        return None