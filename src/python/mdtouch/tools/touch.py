import logging
import sys

from mdtouch.core.toucher import touch_path


def error_message(path: str, error: OSError) -> str:
    """Formats the message reported when a path cannot be touched, e.g.
    `Error touching a/b.txt: No such file or directory (os error 2)`."""
    if error.strerror is None:
        return f"Error touching {path}: {error}"
    return f"Error touching {path}: {error.strerror} (os error {error.errno})"


def touch(*files: str) -> None:
    """Creates each file if it does not exist, otherwise updates its access and modification
    times to the current time.

    Files are processed in order. Processing stops at the first file that cannot be touched,
    in which case the remaining files are left alone and the exit status is non-zero.

    Args:
        files: the files to touch
    """
    logger = logging.getLogger(__name__)
    for path in files:
        logger.debug(f"Touching {path}")
        try:
            touch_path(path)
        except OSError as e:
            sys.exit(error_message(path, e))
