import enum
import logging
import math
import random
from dataclasses import dataclass

from .config import GameConfig
from .geometry import distance, is_covered, normalize_angle, reflect, unit_normal

logger = logging.getLogger(__name__)


class TickResult(enum.Enum):
    CONTINUED = "continued"
    DEFLECTED = "deflected"
    GAME_OVER = "game_over"


@dataclass
class BallState:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0

    @property
    def speed(self):
        return math.hypot(self.vx, self.vy)


@dataclass
class PaddleState:
    angle: float = 0.0
    half_width: float = 0.5


@dataclass
class MatchState:
    score: int = 0
    running: bool = True
    ticks: int = 0


class Simulation:
    def __init__(self, config=None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()

        vx, vy = self.config.initial_velocity
        self.ball = BallState(0.0, 0.0, float(vx), float(vy))
        self.paddle = PaddleState(0.0, self.config.paddle_half_width)
        self.match = MatchState()

    @property
    def running(self):
        return self.match.running

    def stop(self):
        if self.match.running:
            logger.info("Match stopped at score %d", self.match.score)
        self.match.running = False

    # ── Physics ──────────────────────────────────────────────

    def step(self, paddle_delta=0.0):
        if not self.match.running:
            return TickResult.GAME_OVER

        self.paddle.angle = normalize_angle(self.paddle.angle + paddle_delta)

        ball = self.ball
        ball.x += ball.vx
        ball.y += ball.vy
        self.match.ticks += 1

        dist = distance(ball.x, ball.y)
        # Ball can pass through the center; nothing happens in open play
        if dist < self.config.radius:
            return TickResult.CONTINUED

        normal = unit_normal(ball.x, ball.y)
        if normal is None:
            return TickResult.CONTINUED

        crossing = normalize_angle(math.atan2(ball.y, ball.x))
        if is_covered(crossing, self.paddle.angle, self.paddle.half_width):
            self._deflect(normal)
            logger.debug("Deflected at %.3f rad, score %d", crossing, self.match.score)
            return TickResult.DEFLECTED

        self.match.running = False
        logger.info("Missed at %.3f rad (paddle %.3f), final score %d",
                    crossing, self.paddle.angle, self.match.score)
        return TickResult.GAME_OVER

    def _deflect(self, normal):
        nx, ny = normal
        ball = self.ball
        cfg = self.config

        ball.vx, ball.vy = reflect(ball.vx, ball.vy, nx, ny)

        # Randomness keeps the ball out of repeating paths
        p = cfg.perturbation
        ball.vx += self.rng.uniform(-p, p)
        ball.vy += self.rng.uniform(-p, p)

        if cfg.speed_up > 0:
            self._speed_up()

        inside = cfg.radius - cfg.inset
        ball.x = nx * inside
        ball.y = ny * inside

        self.match.score += 1

    def _speed_up(self):
        ball = self.ball
        inc = self.config.speed_up
        if ball.vx != 0:
            ball.vx += math.copysign(inc, ball.vx)
        if ball.vy != 0:
            ball.vy += math.copysign(inc, ball.vy)

        cap = self.config.max_speed
        speed = ball.speed
        if cap is not None and speed > cap:
            ball.vx *= cap / speed
            ball.vy *= cap / speed
