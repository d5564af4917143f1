"""Main entry point for mdtouch."""

import logging
import sys
from typing import List
from typing import Optional

import defopt

from mdtouch.core.build_info import BUILD_INFO
from mdtouch.tools.touch import touch

HELP_FLAGS: List[str] = ["-h", "-?"]


def help_message() -> str:
    """Returns the usage message describing the tool and its options."""
    return (
        f"Usage: {BUILD_INFO.name} [OPTIONS] <file> [file...]\n\n"
        "A command line tool to mimic the behaviour of the Unix touch command on Windows.\n"
        "If the file does not exist, it will be created. Otherwise, its access and modification\n"
        "times will be updated to the current time.\n\n"
        "Options:\n"
        "  -h, -?      Display this help message and exit.\n"
    )


def main(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    logger = logging.getLogger(__name__)
    if len(argv) == 0:
        print(BUILD_INFO.banner())
        return
    if any(arg in HELP_FLAGS for arg in argv):
        print(help_message())
        return
    logger.info(f"Running command: {BUILD_INFO.name} " + " ".join(argv))
    try:
        # everything after "--" is a file, even if it looks like an option
        defopt.run(touch, argv=["--", *argv], version=False)
        logger.info("Completed successfully.")
    except (Exception, SystemExit) as e:
        logger.info("Failed on command: " + " ".join(argv))
        raise e


if __name__ == "__main__":
    main()
