import importlib.metadata

from gmail_tools.config import CFG


def get_version() -> str:
    """Installed version of the package, or 0.0.0 when running from a source checkout."""
    try:
        return importlib.metadata.version(CFG.package_name.replace("_", "-"))
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
