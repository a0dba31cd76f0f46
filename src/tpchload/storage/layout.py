import logging
from typing import List

from tpchload.config.strings import TPCH_TABLES, remote_table_dir
from tpchload.errors import RemoteDirCreationFailure, RemoteDirExists
from tpchload.storage.client import DirectoryStatus, StorageClient

logger = logging.getLogger(__name__)


def remote_layout(remote_dir: str) -> List[str]:
    """
    The directories that hold the generated tables: the target directory
    followed by one directory per table.
    """
    return [remote_dir] + [remote_table_dir(remote_dir, table) for table in TPCH_TABLES]


def ensure_remote_layout(storage: StorageClient, remote_dir: str) -> None:
    """
    Creates the remote directory tree. The target directory must not exist
    yet. Directories created before a failure are left in place.
    """
    status = storage.directory_status(remote_dir)
    if status == DirectoryStatus.Exists:
        raise RemoteDirExists("The directory '{}' already exists".format(remote_dir))
    elif status == DirectoryStatus.Unknown:
        logger.warning(
            "Could not determine whether '%s' exists. Attempting to create it anyway.",
            remote_dir,
        )

    logger.info("Creating all the HDFS directories")
    for path in remote_layout(remote_dir):
        if not storage.mkdir(path):
            raise RemoteDirCreationFailure(
                "Failed to create the directory '{}'".format(path)
            )
        logger.debug("Created %s", path)
