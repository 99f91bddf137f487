import math

TWO_PI = 2 * math.pi


def distance(x, y):
    return math.hypot(x, y)


def normalize_angle(a):
    a = math.fmod(a, TWO_PI)
    if a < 0:
        a += TWO_PI
    # -1e-17 + 2pi rounds to exactly 2pi
    if a >= TWO_PI:
        a = 0.0
    return a


def angular_difference(a, b):
    """Shortest unsigned distance between two angles, in [0, pi]."""
    diff = abs(normalize_angle(a) - normalize_angle(b))
    if diff > math.pi:
        diff = TWO_PI - diff
    return diff


def signed_angle_difference(target, current):
    """Signed shortest turn from ``current`` to ``target``, in (-pi, pi]."""
    diff = normalize_angle(target) - normalize_angle(current)
    if diff > math.pi:
        diff -= TWO_PI
    elif diff <= -math.pi:
        diff += TWO_PI
    return diff


def unit_normal(x, y):
    d = distance(x, y)
    if d == 0:
        return None
    return x / d, y / d


def reflect(vx, vy, nx, ny):
    dot = vx * nx + vy * ny
    return vx - 2 * dot * nx, vy - 2 * dot * ny


def is_covered(crossing_angle, paddle_angle, half_width):
    return angular_difference(crossing_angle, paddle_angle) <= half_width
