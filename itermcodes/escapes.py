"""Single-shot iTerm2 escape codes.

Each function writes one escape sequence to `out`, or to the standard output
when `out` is not given. See
https://www.iterm2.com/documentation-escape-codes.html for the details.
"""
from base64 import b64encode
from enum import Enum

from itermcodes.errors import ContractViolation
from itermcodes.utils.output import write


def osc(command):
    return '\033]{}\a'.format(command)


def osc1337(command):
    return osc('1337;{}'.format(command))


class CursorShape(Enum):
    """The possible cursor shapes."""
    # A solid vertical block
    BLOCK = 0
    # A thin vertical line
    VERTICAL_BAR = 1
    # A thin horizontal line
    UNDERLINE = 2


class AttentionType(Enum):
    """The possible types of attention requests."""
    # Start bouncing the dock icon
    YES = 'yes'
    # Stop bouncing the dock icon
    NO = 'no'
    # Show fireworks at the cursor
    FIREWORK = 'fireworks'


def coerce_enum(enum_class, value):
    """Accepts a member, a member value or a member name."""
    # True == 1 would otherwise select a member by value.
    if not isinstance(value, bool):
        try:
            return enum_class(value)
        except (ValueError, TypeError):
            pass
        try:
            return enum_class[value]
        except (KeyError, TypeError):
            pass
    raise ContractViolation(
        'Invalid {}: {!r}'.format(enum_class.__name__, value)
    )


def anchor(url, display_text, out=None):
    """Display a clickable link with custom display text."""
    write(
        '{}{}{}'.format(osc('8;;{}'.format(url)), display_text, osc('8;;')),
        out=out
    )


def set_cursor_shape(shape, out=None):
    shape = coerce_enum(CursorShape, shape)
    write(osc1337('CursorShape={}'.format(shape.value)), out=out)


def set_mark(out=None):
    """Set a mark at the current line."""
    write(osc1337('SetMark'), out=out)


def steal_focus(out=None):
    """Attempt to make iTerm2 the focused application."""
    write(osc1337('StealFocus'), out=out)


def clear_scrollback(out=None):
    write(osc1337('ClearScrollback'), out=out)


def set_current_dir(path, out=None):
    """Tell the terminal the current working directory."""
    write(osc1337('CurrentDir={}'.format(path)), out=out)


def send_notification(message, out=None):
    """Post a system wide notification."""
    write(osc('9;{}'.format(message)), out=out)


def set_clipboard(text, out=None):
    """Copy `text` to the general pasteboard."""
    write(
        osc1337('CopyToClipboard=') + text + '\n' + osc1337('EndCopy'),
        out=out
    )


def set_tab_colors(red, green, blue, out=None):
    """Set the tab color to a custom RGB value.

    Raises:
        ContractViolation: If a channel is outside `[0, 255]`.
    """
    channels = (('red', red), ('green', green), ('blue', blue))
    for name, value in channels:
        if isinstance(value, bool) or not isinstance(value, int) \
                or not 0 <= value <= 255:
            raise ContractViolation(
                '{} must be an integer in [0, 255], got {!r}'.format(
                    name, value)
            )

    write(''.join(
        osc('6;1;bg;{};brightness;{}'.format(name, value))
        for name, value in channels
    ), out=out)


def restore_tab_colors(out=None):
    write(osc('6;1;bg;*;default'), out=out)


def set_color_palette(colors, out=None):
    """Change the color palette.

    `colors` is passed through, e.g. "fg=ff0000" or "preset=Light Background".
    """
    write(osc1337('SetColors={}'.format(colors)), out=out)


def cursor_guide(show, out=None):
    """Set the visibility of the cursor guide."""
    write(
        osc1337('HighlightCursorLine={}'.format('yes' if show else 'no')),
        out=out
    )


def attention(kind, out=None):
    """Bounce the dock icon or show fireworks."""
    kind = coerce_enum(AttentionType, kind)
    write(osc1337('RequestAttention={}'.format(kind.value)), out=out)


def set_background_image(filename, out=None):
    """Set the terminal background to the image at `filename`."""
    encoded = b64encode(filename.encode('utf-8')).decode('ascii')
    write(osc1337('SetBackgroundImageFile={}'.format(encoded)), out=out)


def download_image(args, img_data, out=None):
    """Send a raw `File=` sequence.

    `args` is the already formatted argument list and `img_data` the base64
    encoded contents. Prefer `itermcodes.File`, which builds both.
    """
    if isinstance(img_data, str):
        img_data = img_data.encode('ascii')
    write(
        '\033]1337;File={}:'.format(args).encode('utf-8') + img_data + b'\a',
        out=out
    )


def set_touchbar_key_label(key, value, out=None):
    write(osc1337('SetKeyLabel={}={}'.format(key, value)), out=out)


def push_current_touchbar_labels(out=None):
    write(osc1337('PushKeyLabels'), out=out)


def pop_current_touchbar_labels(out=None):
    write(osc1337('PopKeyLabels'), out=out)


def push_touchbar_label(label, out=None):
    """Push the current key labels under the name `label`."""
    write(osc1337('PushKeyLabels={}'.format(label)), out=out)


def pop_touchbar_label(label, out=None):
    """Pop key labels up to and including the ones pushed as `label`."""
    write(osc1337('PopKeyLabels={}'.format(label)), out=out)


def set_unicode_version(version, out=None):
    write(osc1337('UnicodeVersion={}'.format(version)), out=out)
