from .color import Color
from .vector import Vec

from dataclasses import dataclass, field
import logging
import math
import multiprocessing
import time

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    spheres: list
    background_color: Color
    camera_pos: Vec = field(default_factory=lambda: Vec(0.0, 0.0, 0.0))
    viewport_size: float = 1.0
    projection_plane_distance: float = 1.0


@dataclass
class Options:
    min_t: float = 1.0        # Near clipping distance, exclusive
    max_t: float = math.inf   # Far clipping distance, exclusive
    proc_count: int = 1
    reverse: bool = False     # Scan pixels back to front


def canvas_to_viewport(point, canvas, scene):
    """ Map a centered canvas coordinate to a point on the viewport plane """
    return Vec(
        point[0] * scene.viewport_size / canvas.width,
        point[1] * scene.viewport_size / canvas.height,
        scene.projection_plane_distance
    )


def closest_intersection(origin, d, spheres, min_t, max_t):
    closest_t, closest_sphere = math.inf, None

    for sphere in spheres:
        for t in sphere.intersection(origin, d):
            # Strict comparisons keep the first sphere on ties
            if min_t < t < max_t and t < closest_t:
                closest_t, closest_sphere = t, sphere

    return closest_t, closest_sphere


def trace_ray(scene, d, min_t, max_t):
    _, sphere = closest_intersection(scene.camera_pos, d, scene.spheres, min_t, max_t)

    if sphere is None:
        return scene.background_color

    return sphere.color


def pixel_coords(canvas, reverse=False):
    xs = range(-(canvas.width // 2), canvas.width // 2)
    ys = range(-(canvas.height // 2), canvas.height // 2)

    if reverse:
        xs, ys = xs[::-1], ys[::-1]

    for y in ys:
        for x in xs:
            yield x, y


def render_row(scene, canvas, options, y):
    xs = range(-(canvas.width // 2), canvas.width // 2)

    if options.reverse:
        xs = xs[::-1]

    return [(x, trace_ray(scene, canvas_to_viewport((x, y), canvas, scene), options.min_t, options.max_t))
            for x in xs]


def render_worker(scene, canvas, options, in_queue, out_queue):
    while True:
        y = in_queue.get()

        if y is None:
            break

        try:
            row = render_row(scene, canvas, options, y)
        except Exception as e:
            # The parent expects one reply per row
            out_queue.put((y, e))
            break

        out_queue.put((y, row))


def _render_serial(scene, canvas, options):
    for x, y in pixel_coords(canvas, options.reverse):
        d = canvas_to_viewport((x, y), canvas, scene)
        canvas.put_pixel(x, y, trace_ray(scene, d, options.min_t, options.max_t))


def _render_parallel(scene, canvas, options):
    ys = range(-(canvas.height // 2), canvas.height // 2)

    if options.reverse:
        ys = ys[::-1]

    job_in_queue = multiprocessing.Queue()
    job_out_queue = multiprocessing.Queue()

    for y in ys:
        job_in_queue.put(y)

    for i in range(options.proc_count):
        job_in_queue.put(None)

    processes = []

    try:
        for i in range(options.proc_count):
            proc = multiprocessing.Process(
                target=render_worker,
                args=(scene, canvas, options, job_in_queue, job_out_queue)
            )

            processes.append(proc)
            proc.start()

        # Drain before joining so workers never block on a full pipe
        for n in range(len(ys)):
            y, row = job_out_queue.get()

            if isinstance(row, Exception):
                logger.error('Worker failed on row %d: %s', y, row)
                raise row

            logger.debug('Received row %d', y)

            for x, color in row:
                canvas.put_pixel(x, y, color)
    finally:
        for proc in processes:
            if proc.is_alive():
                proc.terminate()
            proc.join()


def render_scene(scene, canvas, options=None):
    """
    Cast one ray per pixel of `canvas` into `scene` and write the result.

    Pixels are independent of each other, so with `options.proc_count > 1`
    rows are farmed out to worker processes; only this process writes to
    the canvas. Returns the canvas.
    """
    if options is None:
        options = Options()

    logger.info('Rendering %d spheres onto a %dx%d canvas...',
                len(scene.spheres), canvas.width, canvas.height)
    u = time.time()

    if options.proc_count > 1:
        _render_parallel(scene, canvas, options)
    else:
        _render_serial(scene, canvas, options)

    v = time.time()
    logger.info('Scene took %.3f seconds to render', v - u)

    return canvas
