import os

from attr import frozen

DEFAULT_BUILD_DATETIME: str = "2025-02-03 10:00:00"
"""Build timestamp used when the `BUILD_DATETIME` environment variable is not set."""

DESCRIPTION: str = (
    "A tool to update file timestamps or create empty files, mimicking the Unix touch command."
)


@frozen
class BuildInfo:
    """Describes this build of the tool for the version banner.

    Attributes:
        name: the name of the tool
        build_datetime: the date and time the tool was built
        description: a one-line description of the tool
    """

    name: str = "mdtouch"
    build_datetime: str = DEFAULT_BUILD_DATETIME
    description: str = DESCRIPTION

    @staticmethod
    def from_env() -> "BuildInfo":
        """Builds a `BuildInfo`, taking the build timestamp from `BUILD_DATETIME` if set."""
        build_datetime = os.environ.get("BUILD_DATETIME") or DEFAULT_BUILD_DATETIME
        return BuildInfo(build_datetime=build_datetime)

    def banner(self) -> str:
        return f"{self.name}  {self.build_datetime}\n{self.description}"


BUILD_INFO: BuildInfo = BuildInfo.from_env()
