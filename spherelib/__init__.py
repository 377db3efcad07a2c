from .core import (Scene, Options, canvas_to_viewport, closest_intersection, trace_ray, pixel_coords, render_row,
                   render_worker, render_scene)
from .canvas import Canvas
from .color import Color, ColorException, STD_COLORS
from .primitives import Sphere, intersect_ray_sphere, NO_INTERSECTION
from .vector import Vec, VectorException, VectorSizeException, DegenerateRayException

__all__ = ["Scene", "Options", "canvas_to_viewport", "closest_intersection", "trace_ray", "pixel_coords",
           "render_row", "render_worker", "render_scene", "Canvas", "Color", "ColorException", "STD_COLORS",
           "Sphere", "intersect_ray_sphere", "NO_INTERSECTION", "Vec", "VectorException",
           "VectorSizeException", "DegenerateRayException"]
