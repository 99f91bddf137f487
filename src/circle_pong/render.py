import math

BLANK = " "
BOUNDARY_CHAR = "."
PADDLE_CHAR = "="
BALL_CHAR = "O"
CENTER_CHAR = "+"


class RenderSurface:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.grid = [[BLANK] * width for _ in range(height)]

    def put(self, col, row, ch):
        if 0 <= col < self.width and 0 <= row < self.height:
            self.grid[row][col] = ch

    def get(self, col, row):
        return self.grid[row][col]

    def rows(self):
        return ["".join(r) for r in self.grid]

    def to_text(self):
        return "\n".join(self.rows())


class Projection:
    """Maps arena coordinates onto grid cells.

    Character cells are about twice as tall as they are wide, so the vertical
    axis is squashed by ``aspect``.
    """

    def __init__(self, width, height, scale, aspect):
        self.cx = width // 2
        self.cy = height // 2
        self.scale = scale
        self.aspect = aspect

    def to_cell(self, x, y):
        col = self.cx + int(round(x * self.scale))
        row = self.cy + int(round(y * self.scale * self.aspect))
        return col, row

    def polar(self, radius, angle):
        return self.to_cell(radius * math.cos(angle), radius * math.sin(angle))


def arc_angles(center, half_width, step):
    span = 2 * half_width
    n = max(1, int(math.ceil(span / step)))
    start = center - half_width
    return [start + span * i / n for i in range(n + 1)]


def render_frame(state, config):
    surface = RenderSurface(config.grid_width, config.grid_height)
    proj = Projection(config.grid_width, config.grid_height, config.scale, config.aspect)
    radius = config.radius

    # Boundary guide
    if config.show_boundary:
        steps = int(round(360.0 / config.boundary_step_deg))
        for i in range(steps):
            a = math.radians(i * config.boundary_step_deg)
            surface.put(*proj.polar(radius, a), BOUNDARY_CHAR)

    # Paddle
    paddle = state.paddle
    for a in arc_angles(paddle.angle, paddle.half_width, config.paddle_draw_step):
        surface.put(*proj.polar(radius, a), PADDLE_CHAR)

    # Ball
    surface.put(*proj.to_cell(state.ball.x, state.ball.y), BALL_CHAR)

    # Center
    surface.put(proj.cx, proj.cy, CENTER_CHAR)

    return surface


# ── Frame text ───────────────────────────────────────────────

def status_lines(state, mode="manual", game_over=False):
    lines = [f"  Score: {state.match.score}"]
    if mode == "auto":
        lines.append("  AUTO PLAY  Q:Quit")
    else:
        lines.append("  A/D or ←/→: Move paddle  Q:Quit")
    if game_over:
        lines.append(f"  GAME OVER! Final Score: {state.match.score}")
        lines.append(f"  Ticks survived: {state.match.ticks}")
    return lines


def compose_frame(surface, status):
    lines = ["╔" + "═" * surface.width + "╗"]
    for row in surface.rows():
        lines.append("║" + row + "║")
    lines.append("╚" + "═" * surface.width + "╝")
    width = surface.width + 2
    for line in status:
        lines.append(line.ljust(width))
    return "\n".join(lines)
