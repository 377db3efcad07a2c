import argparse
import logging
import os
import sys

from spherelib import *

scene = Scene(
    background_color=STD_COLORS['white'],
    # x is horizontal position (right-positive)
    # y is vertical position (top-positive)
    # z is distance from camera (far-positive)
    spheres=[
        Sphere(
            center=Vec(0.0, -1.0, 3.0),
            radius=1.0,
            color=STD_COLORS['red']
        ),
        Sphere(
            center=Vec(2.0, 0.0, 4.0),
            radius=1.0,
            color=STD_COLORS['blue']
        ),
        Sphere(
            center=Vec(-2.0, 0.0, 4.0),
            radius=1.0,
            color=STD_COLORS['green']
        )
    ],
    camera_pos=Vec(0.0, 0.0, 0.0),
    viewport_size=1.0,
    projection_plane_distance=1.0
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Render a scene of spheres to an image')
    parser.add_argument('output', nargs='?', default=os.environ.get('IMG_PATH'),
                        help='Output image path, defaults to $IMG_PATH. The format follows the extension')
    parser.add_argument('--width', type=int, default=600, help='Canvas width in pixels')
    parser.add_argument('--height', type=int, default=600, help='Canvas height in pixels')
    parser.add_argument('--procs', type=int, default=1, help='Number of worker processes')
    parser.add_argument('--min-t', type=float, default=1.0, help='Near clipping distance along each ray')
    parser.add_argument('--reverse', action='store_true', help='Scan pixels in reverse order')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    if not args.output:
        parser.error('no output path given and IMG_PATH is not set')

    if args.width < 1 or args.height < 1:
        parser.error('canvas dimensions must be positive')

    return args


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    options = Options(
        min_t=args.min_t,
        proc_count=args.procs,
        reverse=args.reverse
    )

    canvas = Canvas(args.width, args.height, fill=scene.background_color)
    render_scene(scene, canvas, options)

    try:
        canvas.save(args.output)
    except OSError as e:
        logging.getLogger(__name__).error('Failed to save render: %s', e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
