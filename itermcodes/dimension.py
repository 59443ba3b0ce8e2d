"""Sizes used when displaying images inline.

The width and height are given as a number followed by a unit, or the word
"auto".
    N: N character cells.
    Npx: N pixels.
    N%: N percent of the session's width or height.
    auto: The image's inherent size will be used to determine an
        appropriate dimension.
"""
import re

from itermcodes.errors import ContractViolation


AUTO = 'auto'
PIXEL = 'pixel'
CELLS = 'cells'
PERCENT = 'percent'

DIMENSION_RE = re.compile(r'^(?P<value>[0-9]+)(?P<unit>px|%)?$')


def check_unsigned(value, what):
    # bool is an int subclass, but True cells makes no sense.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ContractViolation(
            '{} must be an integer, got {!r}'.format(what, value)
        )
    if value < 0:
        raise ContractViolation(
            '{} cannot be negative, got {}'.format(what, value)
        )
    return value


class Dimension(object):
    """How large an image should be rendered.

    Use the constructors `auto`, `pixel`, `cells` and `percent` instead of
    instantiating this class directly.
    """

    __slots__ = ('_kind', '_value')

    def __init__(self, kind, value=None):
        if kind == AUTO:
            value = None
        elif kind in (PIXEL, CELLS):
            value = check_unsigned(value, kind)
        elif kind == PERCENT:
            value = check_unsigned(value, kind)
            if value > 100:
                raise ContractViolation('percent cannot be greater than 100')
        else:
            raise ContractViolation('Unknown dimension "{}"'.format(kind))

        self._kind = kind
        self._value = value

    @classmethod
    def auto(cls):
        """The terminal chooses a size."""
        return cls(AUTO)

    @classmethod
    def pixel(cls, value):
        return cls(PIXEL, value)

    @classmethod
    def cells(cls, value):
        return cls(CELLS, value)

    @classmethod
    def percent(cls, value):
        """Percent of the current terminal size, between 0 and 100."""
        return cls(PERCENT, value)

    @classmethod
    def parse(cls, text):
        """Parses the textual forms produced by `str(dimension)`.

        Raises:
            ValueError: When `text` is none of "auto", "N", "Npx" or "N%".
        """
        text = text.strip()
        if text.lower() == AUTO:
            return cls.auto()

        match = DIMENSION_RE.match(text)
        if not match:
            raise ValueError('Invalid dimension "{}"'.format(text))

        value = int(match.group('value'))
        unit = match.group('unit')
        if unit == 'px':
            return cls.pixel(value)
        elif unit == '%':
            return cls.percent(value)
        return cls.cells(value)

    @property
    def kind(self):
        return self._kind

    @property
    def value(self):
        return self._value

    def __str__(self):
        if self._kind == AUTO:
            return AUTO
        elif self._kind == PIXEL:
            return '{}px'.format(self._value)
        elif self._kind == CELLS:
            return '{}'.format(self._value)

        assert self._kind == PERCENT
        if self._value > 100:
            raise ContractViolation('percent cannot be greater than 100')
        return '{}%'.format(self._value)

    def __repr__(self):
        if self._kind == AUTO:
            return 'Dimension.auto()'
        return 'Dimension.{}({})'.format(self._kind, self._value)

    def __eq__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return (self._kind, self._value) == (other._kind, other._value)

    def __hash__(self):
        return hash((self._kind, self._value))
