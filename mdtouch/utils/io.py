import os

import dotenv

DOTENV_LOADED = False


def ensure_dotenv_loaded():
    global DOTENV_LOADED
    if not DOTENV_LOADED:
        dotenv.load_dotenv()
        DOTENV_LOADED = True


def getenv(name: str, default=None) -> str:
    """Get an environment variable. If the variable is not set, return the default value.

    Ensures that the .env file is loaded before attempting to get the environment variable.
    Serves the MDTOUCH_DEBUG, MDTOUCH_RICH_TRACEBACK and MDTOUCH_LOG_LEVEL flags and the
    MDTOUCH_BUILD_DATETIME stamp shown in the summary line.

    Args:
        name: The name of the environment variable.
        default: The default value to return if the environment variable is not set.
    """
    ensure_dotenv_loaded()
    return os.getenv(name, default)
