import io
import numpy as np
import os

from base64 import b64encode
from PIL import Image

from itermcodes.dimension import check_unsigned
from itermcodes.utils.output import ENCODING, write


FILE_PREFIX = b'\033]1337;File='
PAYLOAD_SEPARATOR = b':'
TERMINATOR = b'\a'


class File(object):
    """Builder for drawing images in (or downloading files to) the terminal.

    Every setter returns the builder so calls can be chained:

        File.read('path/to/some/image.png') \\
            .set_height(Dimension.cells(14)) \\
            .set_width(Dimension.percent(100)) \\
            .set_preserve_aspect_ratio(False) \\
            .show()

    Parameters that were never set are left out of the escape sequence, in
    which case iTerm2 applies its own defaults.

    See https://www.iterm2.com/documentation-images.html for the protocol.
    """

    def __init__(self, contents):
        self.contents = contents
        self.name = None
        self.size = None
        self.width = None
        self.height = None
        self.preserve_aspect_ratio = None

    @classmethod
    def from_bytes(cls, data):
        """Creates a new image from its content, without copying it."""
        return cls(data)

    @classmethod
    def read(cls, path):
        """Creates a new image from the file located at `path`.

        Raises:
            OSError: If the file can't be opened or read.
        """
        full_path = os.path.expanduser(path)
        with open(full_path, 'rb') as f:
            contents = f.read()
        return cls(contents)

    @classmethod
    def from_pil(cls, image_pil, format='PNG'):
        """Creates a new image by encoding a `PIL.Image.Image` in memory."""
        image_bytes = io.BytesIO()
        image_pil.save(image_bytes, format=format)
        return cls(image_bytes.getvalue())

    @classmethod
    def from_array(cls, image, format='PNG'):
        """Creates a new image from an array of shape `(height, width)` or
        `(height, width, channels)` with values in `[0, 255]`.
        """
        image_pil = Image.fromarray(np.uint8(np.squeeze(image)))
        return cls.from_pil(image_pil, format=format)

    def set_name(self, name):
        """Set the name of the file, mostly useful with `download`.

        iTerm2 uses "Unnamed file" when no name is sent.
        """
        self.name = name
        return self

    def set_size(self, size):
        """Set the size of the file in bytes.

        Used with `download` for showing the progress indicator.
        """
        self.size = size
        return self

    def set_width(self, width):
        self.width = width
        return self

    def set_height(self, height):
        self.height = height
        return self

    def set_preserve_aspect_ratio(self, preserve):
        """Specifies whether the aspect ratio of the image should be kept."""
        self.preserve_aspect_ratio = preserve
        return self

    def arguments(self, inline):
        """Returns the `key=value` pairs of the sequence, in wire order.

        Raises:
            ContractViolation: If the size is not a non-negative integer.
        """
        args = []
        if self.name is not None:
            args.append(('name', self.name))
        if self.size is not None:
            args.append(('size', check_unsigned(self.size, 'size')))
        if self.width is not None:
            args.append(('width', self.width))
        if self.height is not None:
            args.append(('height', self.height))
        if self.preserve_aspect_ratio is not None:
            args.append(
                ('preserveAspectRatio', int(bool(self.preserve_aspect_ratio)))
            )
        args.append(('inline', int(bool(inline))))
        return args

    def encode(self, inline):
        """Returns the full escape sequence as bytes."""
        # Invalid dimensions raise here, before anything is written.
        buf = FILE_PREFIX
        for key, value in self.arguments(inline):
            buf += '{}={};'.format(key, value).encode(ENCODING)
        buf += PAYLOAD_SEPARATOR
        buf += b64encode(self.contents)
        buf += TERMINATOR
        return buf

    def download(self, out=None):
        """Offers the file for download without displaying it."""
        write(self.encode(inline=False), out=out)

    def show(self, out=None):
        """Displays the image in the terminal, followed by a newline."""
        write(self.encode(inline=True) + b'\n', out=out)
