"""Configuration for the `itc` command line tool.

Settings are `section.key` pairs read from YAML files. The packaged
`base_config.yml` holds the defaults and is extended with the user's config
file, the files passed with `--config` and the `--override` options.
"""
import logging
import os.path
import yaml

from easydict import EasyDict

from itermcodes.dimension import Dimension
from itermcodes.utils.homedir import get_user_config_path


logger = logging.getLogger(__name__)

BASE_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'base_config.yml'
)

DIMENSION = 'dimension'

# Accepted type for every setting. `None` is always accepted and means the
# setting is not sent to the terminal.
CONFIG_TYPES = {
    'image': {
        'width': DIMENSION,
        'height': DIMENSION,
        'preserve_aspect_ratio': bool,
    },
    'download': {
        'name': bool,
        'size': bool,
    },
    'output': {
        'flush': bool,
    },
}


def get_config(config_files=None, override_params=None):
    """Returns the effective configuration.

    The packaged base config is extended, in order, with the user's config
    file (when present), `config_files` and finally `override_params`.
    """
    config = get_base_config()

    filenames = []
    user_config_path = get_user_config_path()
    if os.path.exists(user_config_path):
        filenames.append(user_config_path)
    if config_files:
        filenames.extend(config_files)

    if filenames:
        merge_into(load_config_files(filenames), config)
    if override_params:
        merge_into(parse_override(override_params), config)

    return config


def get_base_config(base_config_filename=BASE_CONFIG_PATH):
    return load_config_files([base_config_filename])


def load_config_files(filename_or_filenames, warn_overwrite=True):
    if isinstance(filename_or_filenames, (list, tuple)):
        filenames = filename_or_filenames
    else:
        filenames = [filename_or_filenames]

    if len(filenames) <= 0:
        logger.error('Tried to load 0 config files.')

    config = EasyDict({})
    for filename in filenames:
        with open(filename) as f:
            new_config = yaml.safe_load(f) or {}
        if not isinstance(new_config, dict):
            raise ValueError(
                'Config file "{}" must contain a mapping'.format(filename)
            )
        merge_into(new_config, config, warn_overwrite=warn_overwrite)
    return config


def check_value(section, key, value):
    """Checks `value` is acceptable for the `section.key` setting.

    Raises:
        ValueError: For unknown settings or values of the wrong type.
    """
    try:
        expected = CONFIG_TYPES[section][key]
    except KeyError:
        raise ValueError('Unknown config key "{}.{}"'.format(section, key))

    if value is None:
        return value

    if expected == DIMENSION:
        # YAML reads `width: 12` as an int; cells are valid dimensions.
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(
                'Incorrect type "{}" for key "{}.{}". Must be a dimension'
                .format(type(value), section, key)
            )
        Dimension.parse(str(value))
    elif not isinstance(value, expected):
        raise ValueError(
            'Incorrect type "{}" for key "{}.{}". Must be "{}"'.format(
                type(value), section, key, expected)
        )

    return value


def merge_into(new_config, base_config, warn_overwrite=False):
    """Merge the `section.key` settings of `new_config` into `base_config`.

    Values in `new_config` win.
    """
    for section, values in new_config.items():
        if section not in CONFIG_TYPES:
            raise ValueError('Unknown config section "{}"'.format(section))
        if not isinstance(values, dict):
            raise ValueError(
                'Config section "{}" must be a mapping'.format(section)
            )

        if section not in base_config:
            base_config[section] = {}
        base_section = base_config[section]

        for key, value in values.items():
            check_value(section, key, value)
            previous = base_section.get(key)
            if warn_overwrite and previous is not None and previous != value:
                logger.warning('Overwrote key "{}.{}"'.format(section, key))
            base_section[key] = value

    return base_config


def parse_override(override_options):
    """Turns `section.key=value` options into a config dict."""
    override_dict = {}
    for option in override_options or ():
        key, separator, value = option.partition('=')
        bits = key.split('.')
        if not separator or len(bits) != 2:
            raise ValueError('Invalid override option "{}"'.format(option))
        section, name = bits
        override_dict.setdefault(section, {})[name] = parse_config_value(value)

    return override_dict


def parse_config_value(value):
    """
    Try to parse the config value to boolean, integer or string.
    We assume all values are strings.
    """
    if value.lower() == 'none':
        return None
    elif value.lower() == 'true':
        return True
    elif value.lower() == 'false':
        return False

    try:
        return int(value)
    except ValueError:
        return value


def dump_config(config):
    plain = dict(
        (section, dict(values)) for section, values in config.items()
    )
    return yaml.safe_dump(plain, default_flow_style=False)
