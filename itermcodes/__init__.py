__version__ = '0.1.0'

__title__ = 'itermcodes'
__description__ = 'Write iTerm2 proprietary escape codes from Python'
__uri__ = 'https://iterm2.com/documentation-escape-codes.html'
__doc__ = __description__ + ' <' + __uri__ + '>'

__author__ = 'itermcodes contributors'
__email__ = 'itermcodes@users.noreply.github.com'

__license__ = 'MIT License'
__copyright__ = 'Copyright (c) 2026 itermcodes contributors'


from itermcodes.annotation import Annotation  # noqa
from itermcodes.dimension import Dimension  # noqa
from itermcodes.errors import ContractViolation  # noqa
from itermcodes.escapes import (  # noqa
    AttentionType, CursorShape, anchor, attention, clear_scrollback,
    cursor_guide, download_image, pop_current_touchbar_labels,
    pop_touchbar_label, push_current_touchbar_labels, push_touchbar_label,
    restore_tab_colors, send_notification, set_background_image,
    set_clipboard, set_color_palette, set_current_dir, set_cursor_shape,
    set_mark, set_tab_colors, set_touchbar_key_label, set_unicode_version,
    steal_focus
)
from itermcodes.image import File  # noqa
from itermcodes.cli import cli  # noqa
