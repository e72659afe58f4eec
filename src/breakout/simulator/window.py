"""
Desktop simulator window using pygame.

Drives the engine at a fixed tick rate and shows it scaled up.

Keyboard Mapping:
    LEFT/RIGHT: Move paddle (mouse movement also moves it)
    SPACE: Pause / resume
    A: Toggle autoplay
    R: Restart game
    ESC/Q: Exit
"""

import pygame
import logging
from dataclasses import dataclass

from ..config.settings import SimulatorSettings
from ..core.engine import BreakoutEngine
from ..core.events import Event, EventBus, EventType
from ..core.session import GameOutcome
from ..graphics.renderer import FrameRenderer
from .input import PaddleController

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "Breakout"
    scale: int = 1
    fps: int = 120
    hud_height: int = 24
    paddle_speed: float = 6.0
    autoplay: bool = False

    bg_color: tuple[int, int, int] = (20, 20, 30)
    text_color: tuple[int, int, int] = (200, 200, 220)

    @classmethod
    def from_settings(cls, settings: SimulatorSettings) -> "WindowConfig":
        return cls(
            title=settings.title,
            scale=settings.scale,
            fps=settings.fps,
            paddle_speed=settings.paddle_speed,
            autoplay=settings.autoplay,
        )


class SimulatorWindow:
    """
    Pygame front-end for a ``BreakoutEngine``.

    The engine must have been built with an ``EventBusListener`` on ``bus``.
    """

    def __init__(
        self,
        engine: BreakoutEngine,
        bus: EventBus,
        config: WindowConfig | None = None,
    ) -> None:
        self.engine = engine
        self.bus = bus
        self.config = config or WindowConfig()

        self.renderer = FrameRenderer(int(engine.canvas_width), int(engine.canvas_height))
        self.renderer.attach(bus)
        self.renderer.set_paddle(engine.paddle.rect)
        self.controller = PaddleController(
            engine,
            speed=self.config.paddle_speed,
            autoplay=self.config.autoplay,
        )

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0

        bus.subscribe(EventType.BALL_MISSED_PADDLE, self._on_ball_missed)
        bus.subscribe(EventType.GAME_WIN, self._on_game_over)
        bus.subscribe(EventType.GAME_LOSE, self._on_game_over)

        logger.info("SimulatorWindow created")

    def _on_ball_missed(self, event: Event) -> None:
        self.engine.reset_ball()

    def _on_game_over(self, event: Event) -> None:
        logger.info(f"{event.type.name} after {self._frame_count} frames")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        scale = self.config.scale
        size = (
            self.renderer.width * scale,
            self.renderer.height * scale + self.config.hud_height,
        )
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 20)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)
            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_LEFT:
                    self.controller.release(-1)
                elif event.key == pygame.K_RIGHT:
                    self.controller.release(1)
            elif event.type == pygame.MOUSEMOTION:
                self.controller.point(event.pos[0] / self.config.scale)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_LEFT:
            self.controller.press(-1)
        elif key == pygame.K_RIGHT:
            self.controller.press(1)
        elif key == pygame.K_SPACE:
            if self.engine.running:
                self.engine.pause()
            else:
                self.engine.resume()
            logger.info(f"Engine {'resumed' if self.engine.running else 'paused'}")
        elif key == pygame.K_a:
            enabled = self.controller.toggle_autoplay()
            logger.info(f"Autoplay {'on' if enabled else 'off'}")
        elif key == pygame.K_r:
            self.engine.reset_game()
            self.engine.resume()

    def _render(self) -> None:
        """Render frame and HUD."""
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)

        frame = self.renderer.render()
        surface = pygame.surfarray.make_surface(frame.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(
                surface,
                (self.renderer.width * self.config.scale, self.renderer.height * self.config.scale),
            )
        self._screen.blit(surface, (0, self.config.hud_height))

        if self._font:
            status = self.renderer.status_text()
            if not self.engine.running and self.renderer.scene.outcome is GameOutcome.IN_PROGRESS:
                status += "  PAUSED"
            text_surface = self._font.render(status, True, self.config.text_color)
            self._screen.blit(text_surface, (8, 4))

        pygame.display.flip()

    def run(self) -> None:
        """Run the window loop until closed."""
        self._init_pygame()
        self._running = True
        self.engine.reset_game()

        try:
            while self._running:
                self._handle_events()
                self.controller.apply()
                self.engine.step()
                self._render()
                self._frame_count += 1
                self._clock.tick(self.config.fps)
        finally:
            self.renderer.detach()
            pygame.quit()
            logger.info(f"Simulator closed after {self._frame_count} frames")
