"""Package version information."""

__version__ = "0.1.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))

PACKAGE_NAME = "txsubmit"


def get_version_tag() -> str:
    """Return the ``name@version`` tag printed at the bottom of error messages."""
    return f"{PACKAGE_NAME}@{__version__}"
