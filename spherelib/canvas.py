import logging

from PIL import Image

from .color import Color, STD_COLORS

logger = logging.getLogger(__name__)


class Canvas:
    """
    A width x height RGB pixel grid addressed in centered coordinates.

    (0, 0) is the middle of the image, +x points right and +y points up.
    Storage is a Pillow image with the usual top-left origin, y down.
    Writes that land outside the image are dropped.
    """

    def __init__(self, width, height, fill=STD_COLORS['black']):
        if int(width) != width or int(height) != height or width < 1 or height < 1:
            raise ValueError('Canvas dimensions must be positive integers, got {}x{}'.format(width, height))

        self.width = int(width)
        self.height = int(height)
        self.img = Image.new('RGB', (self.width, self.height), tuple(fill))

    def _to_storage(self, x, y):
        sx = self.width // 2 + x
        sy = self.height // 2 - y

        if 0 <= sx < self.width and 0 <= sy < self.height:
            return sx, sy

        return None

    def put_pixel(self, x, y, color):
        pos = self._to_storage(x, y)

        if pos is None:
            logger.debug('Dropping off-canvas write at (%d, %d)', x, y)
            return

        self.img.putpixel(pos, tuple(color))

    def get_pixel(self, x, y):
        pos = self._to_storage(x, y)

        if pos is None:
            return None

        return Color(*self.img.getpixel(pos))

    def save(self, destination):
        try:
            self.img.save(destination)
        except (KeyError, ValueError) as e:
            # Pillow reports unknown extensions as ValueError, read-only formats as KeyError
            raise OSError('Unable to encode image to {}: {}'.format(destination, e)) from e

        logger.info('Saved %dx%d image to %s', self.width, self.height, destination)

    def to_image(self):
        return self.img.copy()

    def tobytes(self):
        return self.img.tobytes()
