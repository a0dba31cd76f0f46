import logging
import pathlib
import shutil
import stat
import tempfile
from typing import Optional

logger = logging.getLogger(__name__)

# rwxr--r--
LAUNCHER_MODE = stat.S_IRWXU | stat.S_IRGRP | stat.S_IROTH


class StagingArea:
    """
    A private directory holding the files rendered during one run (the
    launcher script and one properties file per host). Each host gets its own
    properties file, so nothing is overwritten while staging.
    """

    def __init__(self, root: Optional[pathlib.Path] = None) -> None:
        self._root = pathlib.Path(tempfile.mkdtemp(prefix="tpchload_", dir=root))
        self._launcher_path: Optional[pathlib.Path] = None
        logger.debug("Staging files in %s", self._root)

    @property
    def root(self) -> pathlib.Path:
        return self._root

    @property
    def launcher_path(self) -> pathlib.Path:
        if self._launcher_path is None:
            raise RuntimeError("The launcher script has not been written yet.")
        return self._launcher_path

    def write_launcher(self, name: str, contents: str) -> pathlib.Path:
        path = self._root / name
        path.write_text(contents, encoding="UTF-8")
        path.chmod(LAUNCHER_MODE)
        self._launcher_path = path
        return path

    def write_properties(
        self, host_index: int, host: str, contents: str
    ) -> pathlib.Path:
        path = self._root / "host_{}_{}.properties".format(host_index, host)
        path.write_text(contents, encoding="UTF-8")
        return path

    def cleanup(self) -> None:
        """
        Removes the staged files. Failures are logged and otherwise ignored.
        """
        try:
            shutil.rmtree(self._root)
        except OSError as ex:
            logger.warning("Failed to remove staging directory %s: %s", self._root, ex)
