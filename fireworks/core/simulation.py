"""
Fireworks Show - the per-frame simulation driver.

The show owns the active rockets and one RandomSource. A host calls
``tick()`` then ``render(surface)`` once per frame. Physics counts ticks, so
a host running faster or slower than 60 Hz speeds up or slows down the show.

Example:
    show = FireworksShow(ShowConfig(seed=42))
    surface = RasterSurface(show.width, show.height)

    for frame in range(600):
        show.tick()
        show.render(surface)

Input callbacks (clicks, buttons) never touch the rocket list directly: launch
requests are queued and applied at the start of the next tick.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .physics import Vec2
from .presets import ShowConfig
from .random_source import RandomSource
from .rocket import Rocket
from .surface import Surface


@dataclass
class LaunchRequest:
    """Queued launch. ``x`` of None means a random position at launch time."""
    due_tick: int
    x: Optional[float] = None


class FireworksShow:
    """Holds the rockets, spawns new ones, prunes finished ones"""

    def __init__(self, config: Optional[ShowConfig] = None, rng: Optional[RandomSource] = None):
        self.config = (config or ShowConfig()).validate()
        self.rng = rng or RandomSource(self.config.seed)

        self.width = self.config.width
        self.height = self.config.height
        self.auto_launch = self.config.auto_launch

        self.rockets: List[Rocket] = []
        self.frame_count = 0
        self.launched_count = 0
        self._requests: List[LaunchRequest] = []

    # -------------------------------------------------------------------------
    # Frame loop
    # -------------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the show by one frame"""
        self.frame_count += 1

        self._apply_requests()

        if self.auto_launch and self.frame_count % self.config.launch_interval == 0:
            self.launch()

        for rocket in self.rockets:
            rocket.update()

        self.rockets = [r for r in self.rockets if not r.is_completely_done]

    def render(self, surface: Surface) -> None:
        """Clear the surface and draw every rocket in launch order"""
        surface.clear(self.config.background)
        for rocket in self.rockets:
            rocket.draw(surface)

    def run(self, ticks: int, surface: Optional[Surface] = None) -> None:
        """Run several frames, rendering each one if a surface is given"""
        for _ in range(ticks):
            self.tick()
            if surface is not None:
                self.render(surface)

    # -------------------------------------------------------------------------
    # Launching
    # -------------------------------------------------------------------------

    def launch_height(self) -> Optional[float]:
        """Start height for new rockets, None if the canvas is too short"""
        y = self.height - self.config.launch_height_offset
        if self.height <= 0 or y < 0:
            return None
        return y

    def spawn_range(self) -> Optional[Tuple[float, float]]:
        """Horizontal launch range for random launches, None if the canvas is too small"""
        low = self.config.spawn_margin
        high = self.width - self.config.spawn_margin
        if high < low or self.launch_height() is None:
            return None
        return (low, high)

    def launch(self, x: Optional[float] = None) -> Optional[Rocket]:
        """
        Create a rocket immediately.

        Called from inside ``tick()``. Hosts should use ``launch_at`` or
        ``burst`` so the rocket list is not changed mid-frame.

        Returns:
            The new rocket, or None if the canvas has no room for one
        """
        if x is None:
            bounds = self.spawn_range()
            if bounds is None:
                return None
            x = self.rng.next_float(*bounds)
        elif self.width <= 0 or self.launch_height() is None:
            return None

        cfg = self.config
        start = Vec2(float(x), self.launch_height())
        velocity = Vec2(
            self.rng.next_float(-cfg.launch_drift, cfg.launch_drift),
            self.rng.next_float(-cfg.launch_speed_max, -cfg.launch_speed_min),
        )
        hue = self.rng.next_float(0, 360)

        rocket = Rocket(hue, start, velocity, cfg.stroke_width, rng=self.rng)
        self.rockets.append(rocket)
        self.launched_count += 1
        return rocket

    def launch_at(self, x: float) -> None:
        """Queue a rocket at a horizontal position (pointer click)"""
        self._requests.append(LaunchRequest(self.frame_count + 1, x))

    def burst(self, count: Optional[int] = None) -> int:
        """
        Queue a burst of rockets at random positions, staggered over time.

        Returns:
            Number of rockets queued
        """
        if count is None:
            count = self.rng.next_int(self.config.burst_min, self.config.burst_max)

        first = self.frame_count + 1
        for i in range(count):
            self._requests.append(LaunchRequest(first + i * self.config.burst_stagger))
        return count

    def _apply_requests(self) -> None:
        due = [r for r in self._requests if r.due_tick <= self.frame_count]
        if not due:
            return

        self._requests = [r for r in self._requests if r.due_tick > self.frame_count]
        for request in due:
            self.launch(request.x)

    # -------------------------------------------------------------------------
    # Host controls
    # -------------------------------------------------------------------------

    def clear(self, surface: Optional[Surface] = None) -> None:
        """Drop every rocket and pending launch"""
        self.rockets = []
        self._requests = []
        if surface is not None:
            surface.clear(self.config.background)

    def toggle_auto_launch(self) -> bool:
        self.auto_launch = not self.auto_launch
        return self.auto_launch

    def resize(self, width: int, height: int) -> None:
        """Surface size changed; later launches use the new bounds"""
        self.width = int(width)
        self.height = int(height)

    def reset(self) -> None:
        """Back to the initial state, reseeding the random source"""
        self.clear()
        self.frame_count = 0
        self.launched_count = 0
        self.auto_launch = self.config.auto_launch
        self.width = self.config.width
        self.height = self.config.height
        self.rng.reseed(self.rng.seed)

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------

    @property
    def rocket_count(self) -> int:
        return len(self.rockets)

    @property
    def particle_count(self) -> int:
        """Rockets still climbing plus live explosion particles"""
        return sum(
            1 if not r.explosion_particles else r.particle_total
            for r in self.rockets
        )

    @property
    def pending_launches(self) -> int:
        return len(self._requests)
