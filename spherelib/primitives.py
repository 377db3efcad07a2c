import math
from dataclasses import dataclass

from .color import Color
from .vector import Vec, DegenerateRayException

NO_INTERSECTION = (math.inf, math.inf)


def intersect_ray_sphere(origin, direction, sphere):
    """
    Solve |origin + t * direction - center|^2 = radius^2 for t.

    Returns both roots as (t1, t2) with t1 <= t2, or NO_INTERSECTION when
    the ray misses the sphere.
    """
    k1 = direction.mag2()

    if k1 == 0:
        raise DegenerateRayException('Ray direction must not be the zero vector')

    oc = origin - sphere.center
    k2 = 2 * oc.dot(direction)
    k3 = oc.mag2() - sphere.radius ** 2

    discr = k2 ** 2 - 4 * k1 * k3

    if discr < 0:
        return NO_INTERSECTION

    root = math.sqrt(discr)

    return (-k2 - root) / (2 * k1), (-k2 + root) / (2 * k1)


@dataclass(frozen=True)
class Sphere:
    center: Vec
    radius: float
    color: Color

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError('Sphere radius must be non-negative, got {}'.format(self.radius))

    def intersection(self, origin, direction):
        return intersect_ray_sphere(origin, direction, self)
