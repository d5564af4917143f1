import os
import time


def touch_path(path: str) -> str:
    """Touch the given path, mimicking the Unix `touch` command.

    If nothing exists at the path, an empty file is created. In either case the access and
    modification times are then set to the current time. The path is handed to the OS exactly as
    given, so e.g. an empty string or a trailing slash fails the way the OS decides.

    Args:
        path: the path to touch; its parent directory must already exist

    Raises:
        OSError: if the file cannot be created or its times cannot be updated
    """
    if not os.path.exists(path):
        with open(path, "w"):
            pass
    now = time.time_ns()
    os.utime(path, ns=(now, now))
    return path
