import enum
import logging
import math
import random

from .geometry import signed_angle_difference

logger = logging.getLogger(__name__)


class InputSymbol(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    NONE = "none"


class PaddleController:
    """Produces one paddle-angle delta per tick.

    ``quit_requested`` is raised when the player asked to leave; the game
    loop checks it after every ``compute_delta`` call.
    """

    def __init__(self):
        self.quit_requested = False

    def compute_delta(self, state):
        raise NotImplementedError

    def _poll(self, input_device):
        if input_device is None or not input_device.is_pending():
            return InputSymbol.NONE
        symbol = input_device.read_symbol()
        if not isinstance(symbol, InputSymbol):
            return InputSymbol.NONE
        if symbol is InputSymbol.QUIT:
            self.quit_requested = True
        return symbol


class ManualController(PaddleController):
    def __init__(self, input_device, step):
        super().__init__()
        self.input_device = input_device
        self.step = step

    def compute_delta(self, state):
        symbol = self._poll(self.input_device)
        if symbol is InputSymbol.LEFT:
            return -self.step
        if symbol is InputSymbol.RIGHT:
            return self.step
        return 0.0


class AutonomousController(PaddleController):
    # Tracks the ball's current angle with some jitter; it is not a perfect player.

    def __init__(self, step, jitter, dead_zone, rng=None, input_device=None):
        super().__init__()
        self.step = step
        self.jitter = jitter
        self.dead_zone = dead_zone
        self.rng = rng if rng is not None else random.Random()
        self.input_device = input_device

    def compute_delta(self, state):
        self._poll(self.input_device)
        if self.quit_requested:
            return 0.0

        ball = state.ball
        target = math.atan2(ball.y, ball.x) + self.rng.uniform(-self.jitter, self.jitter)
        diff = signed_angle_difference(target, state.paddle.angle)
        if abs(diff) <= self.dead_zone:
            return 0.0
        logger.debug("Auto paddle %.3f -> %.3f", state.paddle.angle, target)
        return math.copysign(self.step, diff)
