from itermcodes.dimension import check_unsigned
from itermcodes.errors import ContractViolation
from itermcodes.utils.output import ENCODING, write


ANNOTATION_KEY = 'AddAnnotation'
HIDDEN_ANNOTATION_KEY = 'AddHiddenAnnotation'


class Annotation(object):
    """Builder for terminal annotations.

    An annotation is attached to the text at the cursor, or to `length`
    cells starting at the `(x, y)` coordinates when those are given.
    Coordinates are only meaningful together with a length.
    """

    def __init__(self, message):
        self.message = message
        self.length = None
        self.coordinates = None
        self.hidden = False

    def set_length(self, length):
        self.length = length
        return self

    def set_coordinates(self, x, y):
        """Set the (x, y) coordinates of the annotation."""
        self.coordinates = (x, y)
        return self

    def set_hidden(self, hidden=True):
        self.hidden = hidden
        return self

    def value(self):
        """Returns the annotation value for the parameters that were set.

        Raises:
            ContractViolation: If coordinates were set without a length, or
                a length or coordinate is not a non-negative integer.
        """
        if self.length is not None:
            check_unsigned(self.length, 'length')
        if self.coordinates is not None:
            x, y = self.coordinates
            check_unsigned(x, 'x')
            check_unsigned(y, 'y')

        if self.length is None and self.coordinates is None:
            return self.message
        elif self.coordinates is None:
            return '{}|{}'.format(self.length, self.message)
        elif self.length is not None:
            return '{}|{}|{}|{}'.format(self.message, self.length, x, y)

        raise ContractViolation(
            'Invalid parameters: annotation coordinates require a length'
        )

    def key(self):
        return HIDDEN_ANNOTATION_KEY if self.hidden else ANNOTATION_KEY

    def encode(self):
        """Returns the full escape sequence as bytes."""
        return '\033]1337;{}={}\a'.format(
            self.key(), self.value()
        ).encode(ENCODING)

    def show(self, out=None):
        """Displays the annotation."""
        write(self.encode(), out=out)
