from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("folder-organizer")
    except PackageNotFoundError:
        # Fallback when running from a source checkout
        return "0.1.0"
