import enum
import logging
import shlex
import subprocess
from typing import List

logger = logging.getLogger(__name__)


class DirectoryStatus(str, enum.Enum):
    NotFound = "not_found"
    Exists = "exists"
    # The stat failed for a reason other than the path not existing.
    Unknown = "unknown"


class StorageClient:
    """
    The operations the orchestrator needs from the distributed filesystem.
    """

    def directory_status(self, path: str) -> DirectoryStatus:
        raise NotImplementedError

    def mkdir(self, path: str) -> bool:
        """
        Returns `True` iff the directory was created.
        """
        raise NotImplementedError

    def upload_command(self, local_pattern: str, remote_dir: str) -> str:
        """
        Returns a shell command that uploads the local files matching
        `local_pattern` into `remote_dir`. The command runs inside the
        launcher script on each host.
        """
        raise NotImplementedError


class HadoopFsClient(StorageClient):
    """
    Drives HDFS through `<hadoop_home>/bin/hadoop fs`.
    """

    def __init__(self, hadoop_home: str) -> None:
        self._hadoop_home = hadoop_home.rstrip("/") or "/"

    @property
    def executable(self) -> str:
        return "{}/bin/hadoop".format(self._hadoop_home)

    def _fs_command(self, *args: str) -> List[str]:
        return [self.executable, "fs", *args]

    def directory_status(self, path: str) -> DirectoryStatus:
        cmd = self._fs_command("-stat", path)
        logger.debug("Running: %s", shlex.join(cmd))
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as ex:
            logger.warning("Failed to run %s: %s", self.executable, ex)
            return DirectoryStatus.Unknown

        output = result.stdout
        logger.debug("stat returned %d: %s", result.returncode, output.strip())
        if "No such file or directory" in output:
            return DirectoryStatus.NotFound
        if "cannot stat" not in output:
            return DirectoryStatus.Exists
        return DirectoryStatus.Unknown

    def mkdir(self, path: str) -> bool:
        cmd = self._fs_command("-mkdir", path)
        logger.debug("Running: %s", shlex.join(cmd))
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as ex:
            logger.error("Failed to run %s: %s", self.executable, ex)
            return False
        return result.returncode == 0

    def upload_command(self, local_pattern: str, remote_dir: str) -> str:
        # The pattern is left unquoted so that the shell expands it.
        return "{} fs -put {} {}".format(
            shlex.quote(self.executable),
            local_pattern,
            shlex.quote(remote_dir),
        )
