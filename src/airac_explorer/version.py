"""Version information for AIRAC Explorer.

The installed distribution metadata is authoritative; the constant below is
used when running from a source tree that was never installed.
"""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "airac-explorer"

# Version info
__version__ = "0.1.0"  # Fallback version
__license__ = "MIT"


def get_version() -> str:
    """Get the current version string.

    Returns:
        Version string (e.g., "0.1.0").
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return __version__


def get_about_info() -> dict[str, str]:
    """Get complete about information.

    Returns:
        Dictionary with name, version, license and description.
    """
    return {
        "name": "AIRAC Explorer",
        "version": get_version(),
        "license": __license__,
        "description": "AIRAC cycle calculator and explorer",
    }
