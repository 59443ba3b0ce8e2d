"""Simple command line utility called `itc`.

The cli is composed of subcommands that write iTerm2 escape codes to the
standard output.

Its main subcommands are:
    image: For displaying image files inline.
    download: For sending files to the user through the terminal.
    annotate: For attaching an annotation to the text at the cursor.
"""
import click
import logging
import os
import sys

from itermcodes import escapes
from itermcodes.annotation import Annotation
from itermcodes.dimension import Dimension
from itermcodes.errors import ContractViolation
from itermcodes.image import File
from itermcodes.utils.config import dump_config, get_config
from itermcodes.utils.output import write


logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


class DimensionType(click.ParamType):
    name = 'dimension'

    def convert(self, value, param, ctx):
        if isinstance(value, Dimension):
            return value
        try:
            return Dimension.parse(str(value))
        except (ValueError, ContractViolation) as e:
            self.fail(str(e), param, ctx)


DIMENSION = DimensionType()


def config_options(f):
    f = click.option(
        'config_files', '--config', '-c', multiple=True,
        help='Config to use.'
    )(f)
    f = click.option(
        'override_params', '--override', '-o', multiple=True,
        help='Override config params.'
    )(f)
    return f


def load_config(config_files, override_params):
    try:
        return get_config(config_files, override_params)
    except ValueError as e:
        raise click.UsageError(str(e))


def read_files(paths):
    """Yields `(path, File)` for every path that could be read."""
    for path in paths:
        try:
            yield path, File.read(path)
        except OSError as e:
            click.echo('Error while reading {}: {}'.format(path, e), err=True)


def emit(encode, description, flush=True):
    """Writes the sequence returned by `encode()` to the standard output."""
    try:
        sequence = encode()
    except ContractViolation as e:
        raise click.UsageError(str(e))
    logger.debug('{} ({} bytes)'.format(description, len(sequence)))
    write(sequence, flush=flush)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--debug', is_flag=True, help='Log debug information.')
def cli(debug):
    if debug:
        logging.basicConfig(level=logging.DEBUG)


@click.command(help='Display images inline.')
@click.argument('paths', nargs=-1, required=True)
@click.option('--width', type=DIMENSION, help='"auto", N, Npx or N%.')
@click.option('--height', type=DIMENSION, help='"auto", N, Npx or N%.')
@click.option(
    '--preserve-aspect-ratio/--no-preserve-aspect-ratio', default=None,
    help='Whether to keep the aspect ratio of the image.'
)
@config_options
def image(paths, width, height, preserve_aspect_ratio, config_files,
          override_params):
    config = load_config(config_files, override_params)

    if width is None and config.image.width is not None:
        width = DIMENSION.convert(config.image.width, None, None)
    if height is None and config.image.height is not None:
        height = DIMENSION.convert(config.image.height, None, None)
    if preserve_aspect_ratio is None:
        preserve_aspect_ratio = config.image.preserve_aspect_ratio

    shown = 0
    for path, image_file in read_files(paths):
        image_file.set_width(width).set_height(height) \
            .set_preserve_aspect_ratio(preserve_aspect_ratio)
        # Same bytes as `File.show`, trailing newline included.
        emit(
            lambda: image_file.encode(inline=True) + b'\n',
            'Showing {}'.format(path), flush=config.output.flush
        )
        shown += 1

    if shown != len(paths):
        sys.exit(1)


@click.command(help='Download files through the terminal.')
@click.argument('paths', nargs=-1, required=True)
@click.option('--name', help='Name shown to the user (default: base name).')
@config_options
def download(paths, name, config_files, override_params):
    config = load_config(config_files, override_params)

    downloaded = 0
    for path, download_file in read_files(paths):
        if name is not None:
            download_file.set_name(name)
        elif config.download.name:
            download_file.set_name(os.path.basename(path))
        if config.download.size:
            download_file.set_size(len(download_file.contents))
        emit(
            lambda: download_file.encode(inline=False),
            'Downloading {}'.format(path), flush=config.output.flush
        )
        downloaded += 1

    if downloaded != len(paths):
        sys.exit(1)


@click.command(help='Annotate the text at the cursor.')
@click.argument('message')
@click.option('--length', type=click.IntRange(min=0),
              help='Number of cells to annotate.')
@click.option('--coords', type=(click.IntRange(min=0), click.IntRange(min=0)),
              default=None, help='X and Y of the first annotated cell.')
@click.option('--hidden', is_flag=True, help='Hide the annotation.')
def annotate(message, length, coords, hidden):
    annotation = Annotation(message).set_hidden(hidden)
    if length is not None:
        annotation.set_length(length)
    if coords:
        annotation.set_coordinates(*coords)
    emit(annotation.encode, 'Annotating')


@click.command(help='Print a clickable link.')
@click.argument('url')
@click.argument('text', required=False)
def link(url, text):
    escapes.anchor(url, text if text is not None else url)
    click.echo()


@click.command(help='Post a notification.')
@click.argument('message')
def notify(message):
    escapes.send_notification(message)


@click.command(help='Set a mark at the current line.')
def mark():
    escapes.set_mark()


@click.command(help='Make iTerm2 the focused application.')
def focus():
    escapes.steal_focus()


@click.command(help='Clear the scrollback history.')
def clear():
    escapes.clear_scrollback()


CURSOR_SHAPES = {
    'block': escapes.CursorShape.BLOCK,
    'bar': escapes.CursorShape.VERTICAL_BAR,
    'underline': escapes.CursorShape.UNDERLINE,
}


@click.command(help='Change the cursor shape.')
@click.argument('shape', type=click.Choice(sorted(CURSOR_SHAPES)))
def cursor(shape):
    escapes.set_cursor_shape(CURSOR_SHAPES[shape])


@click.command(help='Request attention, or show fireworks.')
@click.argument(
    'kind', type=click.Choice([k.value for k in escapes.AttentionType])
)
def attention(kind):
    escapes.attention(kind)


@click.command(help='Copy text (or the standard input) to the clipboard.')
@click.argument('text', required=False)
def copy(text):
    if text is None:
        text = click.get_text_stream('stdin').read()
    escapes.set_clipboard(text)


@click.command('tab-color', help='Set the tab color.')
@click.argument('rgb', nargs=-1, type=click.IntRange(0, 255))
@click.option('--reset', is_flag=True, help='Restore the default color.')
def tab_color(rgb, reset):
    if reset:
        escapes.restore_tab_colors()
    elif len(rgb) == 3:
        escapes.set_tab_colors(*rgb)
    else:
        raise click.UsageError('Either pass R G B or --reset.')


@click.command('config', help='Print the effective configuration.')
@config_options
def show_config(config_files, override_params):
    config = load_config(config_files, override_params)
    click.echo(dump_config(config), nl=False)


cli.add_command(image)
cli.add_command(download)
cli.add_command(annotate)
cli.add_command(link)
cli.add_command(notify)
cli.add_command(mark)
cli.add_command(focus)
cli.add_command(clear)
cli.add_command(cursor)
cli.add_command(attention)
cli.add_command(copy)
cli.add_command(tab_color)
cli.add_command(show_config)
