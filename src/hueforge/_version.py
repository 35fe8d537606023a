"""Version of the installed hueforge distribution."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Installed version; a local placeholder when running from an uninstalled tree."""
    try:
        return version("hueforge")
    except PackageNotFoundError:
        return "0.0.0+local"
