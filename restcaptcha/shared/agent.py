"""Client identification sent as the User-Agent of the default transport."""

from importlib.metadata import PackageNotFoundError, version

AGENT_NAME = "restcaptcha-client"


def get_agent_name() -> str:
    return AGENT_NAME


def get_version() -> str:
    """Installed distribution version, or 0.0.0 when running from a source tree."""
    try:
        return version(AGENT_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def user_agent() -> str:
    return f"{get_agent_name()}/{get_version()}"
