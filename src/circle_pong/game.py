import logging
import time

from .render import compose_frame, render_frame, status_lines

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives one match: controller -> physics -> render -> sleep, until the
    ball escapes or the player quits.

    ``output`` needs a ``write_frame(text)`` method. ``wait_for_exit`` is
    called once after the final frame, if given.
    """

    def __init__(self, simulation, controller, output, mode="manual",
                 sleep=time.sleep, clock=time.monotonic, wait_for_exit=None):
        self.sim = simulation
        self.controller = controller
        self.output = output
        self.mode = mode
        self.sleep = sleep
        self.clock = clock
        self.wait_for_exit = wait_for_exit
        self.quit = False
        self.frames = 0

    def render(self, game_over=False):
        surface = render_frame(self.sim, self.sim.config)
        status = status_lines(self.sim, self.mode, game_over)
        self.output.write_frame(compose_frame(surface, status))
        self.frames += 1

    def tick(self):
        start = self.clock()
        delta = self.controller.compute_delta(self.sim)
        if self.controller.quit_requested:
            self.quit = True
            self.sim.stop()
            return None

        result = self.sim.step(delta)
        self.render()

        sleep = self.sim.config.tick_interval - (self.clock() - start)
        if sleep > 0:
            self.sleep(sleep)
        return result

    def run(self):
        logger.info("Match started (%s)", self.mode)
        self.render()
        try:
            while self.sim.running:
                self.tick()
        except KeyboardInterrupt:
            self.quit = True
            self.sim.stop()

        self.render(game_over=True)
        logger.info("Match over: score %d after %d ticks%s", self.sim.match.score,
                    self.sim.match.ticks, " (quit)" if self.quit else "")
        if self.wait_for_exit is not None:
            self.wait_for_exit()
        return self.sim.match

