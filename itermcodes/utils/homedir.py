"""itermcodes home (~/.itermcodes) management utilities."""
import os


DEFAULT_ITERMCODES_HOME = os.path.expanduser('~/.itermcodes')
CONFIG_FILENAME = 'config.yml'


def get_itermcodes_home():
    """Returns itermcodes' homedir, which may not exist."""
    # Get the home directory (the default one or the overridden).
    return os.path.abspath(
        os.environ.get('ITERMCODES_HOME', DEFAULT_ITERMCODES_HOME)
    )


def get_user_config_path():
    """Returns the path of the user's config file, which may not exist."""
    return os.path.join(get_itermcodes_home(), CONFIG_FILENAME)
