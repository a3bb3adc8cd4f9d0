"""Pygame-based real-time top-down renderer for the drift demo.

Provides a view of the ground plane (x right, z up the screen) with:
- Vehicle bodies, colored by faction
- Velocity rays
- Trajectory trail for the followed vehicle
- Telemetry overlay
- Keyboard axes for the player vehicle
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from driftkit.control.intent import Faction
from driftkit.core.vector import Vector3
from driftkit.visualization.camera import FollowCamera

if TYPE_CHECKING:
    from driftkit.vehicle.controller import DriftController


def _check_pygame():
    if not PYGAME_AVAILABLE:
        raise ImportError(
            "Pygame is required for visualization. "
            "Install it with: pip install pygame"
        )


class PygameAxes:
    """Keyboard axes in the shape KeyboardInput expects.

    - Throttle: W/Up (+1), S/Down (-1)
    - Sideways: D/Right (+1), A/Left (-1)
    - Boost: Left Shift
    - Reset: R (edge-triggered)
    """

    def __init__(self):
        _check_pygame()
        self._pressed: set = set()

    def note_keydown(self, key: int) -> None:
        """Record a KEYDOWN event for edge-triggered keys."""
        if key == pygame.K_r:
            self._pressed.add("Reset")

    def axis(self, name: str) -> float:
        keys = pygame.key.get_pressed()

        if name == "Throttle":
            value = 0.0
            if keys[pygame.K_w] or keys[pygame.K_UP]:
                value += 1.0
            if keys[pygame.K_s] or keys[pygame.K_DOWN]:
                value -= 1.0
            return value
        elif name == "Sideways":
            value = 0.0
            if keys[pygame.K_d] or keys[pygame.K_RIGHT]:
                value += 1.0
            if keys[pygame.K_a] or keys[pygame.K_LEFT]:
                value -= 1.0
            return value
        elif name == "Boost":
            return 1.0 if keys[pygame.K_LSHIFT] else 0.0
        return 0.0

    def key_pressed(self, name: str) -> bool:
        if name in self._pressed:
            self._pressed.discard(name)
            return True
        return False


@dataclass
class RenderConfig:
    """Renderer configuration."""
    width: int = 1280
    height: int = 720
    scale: float = 8.0              # Pixels per meter
    background_color: Tuple[int, int, int] = (30, 30, 35)
    edge_color: Tuple[int, int, int] = (90, 40, 40)
    velocity_color: Tuple[int, int, int] = (100, 200, 100)
    trail_color: Tuple[int, int, int] = (100, 100, 150)
    text_color: Tuple[int, int, int] = (220, 220, 220)

    faction_colors: Optional[Dict[Faction, Tuple[int, int, int]]] = None

    camera_follow: bool = True
    show_velocity: bool = True
    show_telemetry: bool = True
    show_trail: bool = True
    trail_length: int = 500

    def __post_init__(self):
        if self.faction_colors is None:
            self.faction_colors = {
                Faction.PLAYER: (200, 200, 210),
                Faction.ENEMY: (210, 90, 80),
                Faction.NEUTRAL: (120, 160, 210),
            }


class PygameRenderer:
    """Real-time top-down renderer using Pygame."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize renderer.

        Args:
            config: Render configuration. Uses defaults if None.
        """
        _check_pygame()

        self.config = config or RenderConfig()
        self._initialized = False

        self._screen = None
        self._clock = None
        self._font = None
        self._small_font = None

        # Straight overhead
        self.camera = FollowCamera(offset=Vector3(0.0, 50.0, 0.0), smooth_time=0.3)
        self._camera_pos = Vector3()

        self._trail: List[Tuple[float, float]] = []
        self.axes = PygameAxes()
        self._quit = False

    def init(self) -> None:
        """Initialize Pygame and create window."""
        pygame.init()
        pygame.display.set_caption("DriftKit - Arcade Drift")

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height)
        )
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 24)
        self._small_font = pygame.font.Font(None, 18)

        self._initialized = True

    def quit(self) -> None:
        """Clean up Pygame."""
        if self._initialized:
            pygame.quit()
            self._initialized = False

    def handle_events(self) -> bool:
        """Process window events.

        Returns:
            False once the window should close
        """
        if not self._initialized:
            return not self._quit

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit = True
                elif event.key == pygame.K_t:
                    self.config.show_telemetry = not self.config.show_telemetry
                elif event.key == pygame.K_v:
                    self.config.show_velocity = not self.config.show_velocity
                elif event.key == pygame.K_c:
                    self.config.camera_follow = not self.config.camera_follow
                else:
                    self.axes.note_keydown(event.key)

        return not self._quit

    def _world_to_screen(self, x: float, z: float) -> Tuple[int, int]:
        """Convert ground-plane coordinates to screen coordinates."""
        screen_x = int((x - self._camera_pos.x) * self.config.scale + self.config.width / 2)
        screen_y = int(self.config.height / 2 - (z - self._camera_pos.z) * self.config.scale)
        return screen_x, screen_y

    def _draw_vehicle(self, vehicle: DriftController) -> None:
        """Draw the vehicle body footprint and velocity ray."""
        body = vehicle.body
        half = body.half_extents

        corners_local = [
            Vector3(half.x, 0.0, half.z),
            Vector3(-half.x, 0.0, half.z),
            Vector3(-half.x, 0.0, -half.z),
            Vector3(half.x, 0.0, -half.z),
        ]
        corners_screen = []
        for corner in corners_local:
            world = body.local_to_world(corner)
            corners_screen.append(self._world_to_screen(world.x, world.z))

        color = self.config.faction_colors[vehicle.faction]
        if not vehicle.grounded:
            color = tuple(c // 2 for c in color)

        pygame.draw.polygon(self._screen, color, corners_screen)
        pygame.draw.polygon(self._screen, (100, 100, 110), corners_screen, 2)

        # Nose marker
        nose = body.local_to_world(Vector3(0.0, 0.0, half.z))
        pygame.draw.circle(self._screen, (240, 220, 80), self._world_to_screen(nose.x, nose.z), 3)

        if self.config.show_velocity:
            start = self._world_to_screen(body.position.x, body.position.z)
            tip = body.position + body.velocity * 0.5
            pygame.draw.line(
                self._screen, self.config.velocity_color,
                start, self._world_to_screen(tip.x, tip.z), 2
            )

    def _draw_trail(self, vehicle: DriftController) -> None:
        """Draw vehicle trajectory trail."""
        if not self.config.show_trail:
            return

        pos = vehicle.body.position
        self._trail.append((pos.x, pos.z))

        if len(self._trail) > self.config.trail_length:
            self._trail.pop(0)

        if len(self._trail) > 1:
            points = [self._world_to_screen(x, z) for x, z in self._trail]
            pygame.draw.lines(self._screen, self.config.trail_color, False, points, 1)

    def _draw_ground_edge(self, extent: Optional[float]) -> None:
        if extent is None:
            return
        corners = [(-extent, -extent), (extent, -extent), (extent, extent), (-extent, extent)]
        points = [self._world_to_screen(x, z) for x, z in corners]
        pygame.draw.polygon(self._screen, self.config.edge_color, points, 2)

    def _draw_telemetry(self, vehicle: DriftController) -> None:
        """Draw telemetry overlay."""
        if not self.config.show_telemetry:
            return

        state = vehicle.get_state()

        lines = [
            f"Speed: {state.speed * 3.6:.1f} km/h",
            f"Forward: {state.forward_speed:.1f} m/s",
            f"Lateral: {state.lateral_speed:.1f} m/s",
            f"Drift Angle: {vehicle.get_drift_angle():.1f}°",
            "",
            f"Slip: {state.slip:.2f} ({state.slip_phase.value})",
            f"Grounded: {'yes' if state.grounded else 'no'}",
            f"Yaw: {state.orientation.y:.1f}°",
            f"Throttle: {state.throttle:+.0f}  Turn: {state.turn:+.0f}"
            + ("  BOOST" if state.boost else ""),
        ]

        y = 10
        for line in lines:
            if line:
                text = self._font.render(line, True, self.config.text_color)
                self._screen.blit(text, (10, y))
            y += 22

        help_lines = [
            "Controls:",
            "W/↑ S/↓ - Throttle",
            "A/← D/→ - Turn",
            "Shift - Boost",
            "R - Reset",
            "V - Toggle velocity",
            "T - Toggle telemetry",
            "C - Toggle camera",
            "Esc - Quit"
        ]

        y = 10
        for line in help_lines:
            text = self._small_font.render(line, True, (150, 150, 160))
            self._screen.blit(text, (self.config.width - 150, y))
            y += 18

    def _draw_grid(self) -> None:
        """Draw reference grid."""
        grid_spacing = 10.0  # meters
        grid_color = (40, 40, 45)

        half_w = self.config.width / (2 * self.config.scale)
        half_h = self.config.height / (2 * self.config.scale)

        x = math.floor((self._camera_pos.x - half_w) / grid_spacing) * grid_spacing
        while x <= self._camera_pos.x + half_w:
            sx, _ = self._world_to_screen(x, 0.0)
            pygame.draw.line(self._screen, grid_color, (sx, 0), (sx, self.config.height))
            x += grid_spacing

        z = math.floor((self._camera_pos.z - half_h) / grid_spacing) * grid_spacing
        while z <= self._camera_pos.z + half_h:
            _, sy = self._world_to_screen(0.0, z)
            pygame.draw.line(self._screen, grid_color, (0, sy), (self.config.width, sy))
            z += grid_spacing

    def render(
        self,
        vehicles: Sequence[DriftController],
        follow: DriftController,
        dt: float,
        ground_extent: Optional[float] = None,
        fps: int = 60
    ) -> None:
        """Render current frame.

        Args:
            vehicles: All vehicles to draw
            follow: Vehicle the camera and telemetry track
            dt: Frame time (seconds) for camera smoothing
            ground_extent: Half-size of the ground square, if finite
            fps: Target frame rate
        """
        if not self._initialized:
            self.init()

        if self.config.camera_follow:
            self._camera_pos = self.camera.update(follow.body, dt)

        self._screen.fill(self.config.background_color)
        self._draw_grid()
        self._draw_ground_edge(ground_extent)
        self._draw_trail(follow)

        for vehicle in vehicles:
            self._draw_vehicle(vehicle)

        self._draw_telemetry(follow)

        pygame.display.flip()
        self._clock.tick(fps)

    def clear_trail(self) -> None:
        """Clear the trajectory trail."""
        self._trail.clear()

    def get_fps(self) -> float:
        """Get current FPS."""
        return self._clock.get_fps() if self._clock else 0.0
