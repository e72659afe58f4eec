"""
Main entry point for the Breakout engine.

Runs either the pygame simulator or a headless autoplay session,
depending on ``BREAKOUT_ENV``.
"""

import logging
import sys

from breakout.config.settings import Settings, get_settings
from breakout.core.engine import BreakoutEngine
from breakout.core.events import Event, EventBus, EventBusListener, EventType
from breakout.core.session import GameOutcome


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def run_simulator(settings: Settings) -> None:
    """Run the interactive simulator."""
    from breakout.simulator.window import SimulatorWindow, WindowConfig

    bus = EventBus()
    engine = BreakoutEngine.from_settings(settings.engine, EventBusListener(bus))

    window = SimulatorWindow(
        engine=engine,
        bus=bus,
        config=WindowConfig.from_settings(settings.simulator),
    )
    window.run()


def run_headless(settings: Settings) -> GameOutcome:
    """
    Play one game with the paddle tracking the ball.

    Returns:
        Outcome after the game ended or ``max_ticks`` ran out
    """
    from breakout.simulator.input import PaddleController

    logger = logging.getLogger(__name__)

    bus = EventBus()
    engine = BreakoutEngine.from_settings(settings.engine, EventBusListener(bus))
    controller = PaddleController(engine, autoplay=True)

    def on_ball_missed(event: Event) -> None:
        engine.reset_ball()

    def on_lives_changed(event: Event) -> None:
        logger.info(f"Lives: {event.data['lives']}")

    bus.subscribe(EventType.BALL_MISSED_PADDLE, on_ball_missed)
    bus.subscribe(EventType.LIVES_CHANGED, on_lives_changed)

    ticks = 0
    while engine.running and ticks < settings.max_ticks:
        controller.apply()
        engine.step()
        ticks += 1

    logger.info(
        f"Headless run finished after {ticks} ticks: {engine.outcome.name}, "
        f"{engine.lives} lives, {engine.active_bricks} bricks left"
    )
    return engine.outcome


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Breakout starting...")

    try:
        if settings.is_headless:
            logger.info("Running headless")
            run_headless(settings)
        else:
            logger.info("Running in simulator mode")
            run_simulator(settings)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Breakout stopped")


if __name__ == "__main__":
    main()
