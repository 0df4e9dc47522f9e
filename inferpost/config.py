# Copyright (C) 2013 Wesley Baugh
"""Configuration file access and settings."""
import configparser
import errno
import os
import sys


CONFIG_FNAME = 'inferpost.ini'


def create_default_config():
    """Create a default config file."""
    config = configparser.ConfigParser(interpolation=None)

    config.add_section('classifier')
    config.set('classifier', 'precision', '3')

    config.add_section('corpus')
    config.set('corpus', 'encoding', 'utf-8')
    config.set('corpus', 'ascii_fold', 'false')

    config.add_section('logging')
    config.set('logging', 'level', 'WARNING')
    config.set('logging', 'file', '')

    return config


def get_config(fname=CONFIG_FNAME, create=True, exit=True):
    """Reads a configuration file from disk."""
    config = configparser.ConfigParser(interpolation=None)
    try:
        with open(fname) as f:
            config.read_file(f)  # pragma: no branch
    except IOError as e:
        if e.errno != errno.ENOENT:
            raise  # pragma: no cover
        if create:
            print('Configuration file not found! Creating one...',
                  file=sys.stderr)
            config = create_default_config()
            with open(fname, mode='w') as f:
                config.write(f)
            message = 'Please edit the config file named "{}" in directory "{}"'
        else:
            message = 'Configuration file "{}" not found in directory "{}"'
        print(message.format(fname, os.getcwd()), file=sys.stderr)
        if exit:
            sys.exit(errno.ENOENT)
        else:
            if not create:
                return None
    return config


def load_config(fname=None):
    """Default settings overlaid with the settings of a config file.

    Args:
        fname: Path of the config file. When None, `CONFIG_FNAME` is
            read if it exists and the defaults are used otherwise. An
            explicit path that does not exist is reported on stderr
            before falling back to the defaults.

    Returns:
        A ConfigParser holding every section of the default config.
    """
    config = create_default_config()
    if fname is None:
        if not os.path.exists(CONFIG_FNAME):
            return config
        fname = CONFIG_FNAME
    user_config = get_config(fname=fname, create=False, exit=False)
    if user_config is not None:
        config.read_dict(user_config)
    return config
