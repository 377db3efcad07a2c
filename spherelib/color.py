from collections import namedtuple


class ColorException(ValueError):
    pass


class Color(namedtuple('Color', ['r', 'g', 'b'])):
    """ Immutable 8-bit RGB triple, usable directly as a Pillow pixel """

    __slots__ = ()

    def __new__(cls, r, g, b):
        channels = []
        for c in (r, g, b):
            if isinstance(c, bool) or int(c) != c or not 0 <= c <= 0xff:
                raise ColorException('Color channels must be integers in [0, 255], got {!r}'.format((r, g, b)))
            channels.append(int(c))
        return super().__new__(cls, *channels)

    def __repr__(self):
        return 'Color({}, {}, {})'.format(self.r, self.g, self.b)


STD_COLORS = {
    'black':    Color(0, 0, 0),
    'white':    Color(255, 255, 255),
    'red':      Color(255, 0, 0),
    'green':    Color(0, 255, 0),
    'blue':     Color(0, 0, 255),
}
