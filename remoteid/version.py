"""Library version information."""

VERSION_MAJOR = 0
VERSION_MINOR = 2
VERSION_PATCH = 0
VERSION_STRING = "0.2.0-dev"


def version_to_string() -> str:
    """Return the library version string."""
    return VERSION_STRING