from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace
from typing import Optional

from .config import PRESETS, GameConfig, config_preset
from .controllers import AutonomousController, ManualController
from .game import GameLoop
from .simulation import Simulation

logger = logging.getLogger(__name__)

BANNER = [
    "Circular Pong",
    "Use A and D (or the arrow keys) to move the paddle around the circle.",
    "Keep the ball bouncing to increase your score!",
    "Press any key to start...",
]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="circle-pong", description="Pong inside a circle, in your terminal")
    p.add_argument("--auto", action="store_true", help="Let the computer move the paddle")
    p.add_argument("--preset", default="classic", choices=PRESETS, help="Game tuning preset")
    p.add_argument("--seed", type=int, default=None, help="Random seed for bounces and auto play")
    p.add_argument("--speed-up", type=float, default=None, help="Velocity increment per deflection (0 disables)")
    p.add_argument("--max-speed", type=float, default=None, help="Cap on ball speed when speeding up")
    p.add_argument("--tick", type=float, default=None, help="Seconds per tick")
    p.add_argument("--no-boundary", action="store_true", help="Do not draw the arena outline")
    p.add_argument("--log-file", default=None, help="Write a game log to this file")
    p.add_argument("--verbose", action="store_true", help="Log every deflection and paddle move")
    return p


def config_from_args(args) -> GameConfig:
    cfg = config_preset(args.preset)
    overrides = {}
    if args.speed_up is not None:
        overrides["speed_up"] = args.speed_up
    if args.max_speed is not None:
        overrides["max_speed"] = args.max_speed
    if args.tick is not None:
        overrides["tick_interval"] = args.tick
    if args.no_boundary:
        overrides["show_boundary"] = False
    return replace(cfg, **overrides) if overrides else cfg


def setup_logging(log_file: Optional[str], verbose: bool = False) -> None:
    # stdout is the game screen, so only log when asked to
    if not log_file:
        logging.getLogger("circle_pong").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def make_controller(cfg: GameConfig, auto: bool, input_device, rng: random.Random):
    if auto:
        return AutonomousController(cfg.paddle_step, cfg.auto_jitter, cfg.auto_dead_zone,
                                    rng=rng, input_device=input_device)
    return ManualController(input_device, cfg.paddle_step)


def cmd_play(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        raise SystemExit(f"Invalid settings: {e}")

    setup_logging(args.log_file, args.verbose)
    logger.info("Config: %s", cfg)

    # Imported here so argument errors never touch the terminal mode
    from .terminal import TerminalInput, TerminalOutput

    rng = random.Random(args.seed)
    output = TerminalOutput()
    keyboard = TerminalInput()

    def wait_for_exit():
        output.write_line("\nPress any key to exit...")
        keyboard.drain()
        keyboard.wait_for_key()

    try:
        output.clear()
        for line in BANNER:
            output.write_line(line)
        keyboard.wait_for_key()
        output.clear()
        output.hide_cursor()

        sim = Simulation(cfg, rng)
        controller = make_controller(cfg, args.auto, keyboard, rng)
        loop = GameLoop(sim, controller, output, mode="auto" if args.auto else "manual",
                        wait_for_exit=wait_for_exit)
        match = loop.run()
    except KeyboardInterrupt:
        return 130
    finally:
        keyboard.restore()
        output.show_cursor()

    output.write_line(f"\n  Thanks for playing! Final score: {match.score}\n")
    return 0


def main():
    return cmd_play()


if __name__ == "__main__":
    raise SystemExit(main())
