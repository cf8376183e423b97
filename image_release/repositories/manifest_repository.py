import logging
import os
import re
from itertools import islice

from image_release.errors import ManifestNotFoundError, VersionNotFoundError
from image_release.models import ReleaseVersion

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"[0-9.]+")
PRERELEASE_MARKER = "beta"


class ManifestRepository:
    def __init__(self, file_path: str, lines: int = 3):
        self.file_path: str = file_path
        self.lines: int = lines

    def read_excerpt(self) -> str:
        if not os.path.isfile(self.file_path):
            raise ManifestNotFoundError(f"Manifest {self.file_path} not found")
        with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
            return "".join(islice(f, self.lines))

    def find_version(self) -> ReleaseVersion:
        excerpt = self.read_excerpt()
        number = next(
            (m.group(0).strip(".") for m in VERSION_PATTERN.finditer(excerpt) if any(c.isdigit() for c in m.group(0))),
            "",
        )
        if not number:
            raise VersionNotFoundError(
                f"No version found in the first {self.lines} lines of {self.file_path}"
            )
        prerelease = PRERELEASE_MARKER in excerpt
        logger.debug(f"Matched version {number} (prerelease={prerelease}) in {self.file_path}")
        return ReleaseVersion(number=number, prerelease=prerelease)
