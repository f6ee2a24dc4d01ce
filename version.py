"""
Versioning utils.
"""

__all__ = ('get_version',)

VERSION = '0.1.0'


def get_version():
    """
    Gets the current version number.

    To use this script, simply import it in your setup.py file
    and use the results of get_version() as your package version.
    """
    return VERSION
