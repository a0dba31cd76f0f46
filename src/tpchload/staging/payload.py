import logging
import os
import pathlib
import shlex
import shutil

from tpchload.config.file import ConfigFile
from tpchload.config.params import Parameters, format_number
from tpchload.config.strings import (
    LOCAL_DATA_DIR,
    TPCH_TABLES,
    remote_table_dir,
    table_file_pattern,
)
from tpchload.errors import StagingFailure
from tpchload.partition import SplitAssignment
from tpchload.staging.staging_area import StagingArea
from tpchload.storage.client import StorageClient

logger = logging.getLogger(__name__)


def render_properties(params: Parameters, assignment: SplitAssignment) -> str:
    """
    The properties file read by the generator on a host.
    """
    values = [
        ("scaling_factor", format_number(params.scale_factor)),
        ("num_file_splits", params.num_file_splits),
        ("first_file_split", assignment.first_split),
        ("last_file_split", assignment.last_split),
        ("zipf", params.zipf_factor),
        ("tpch_home", "{}/{}".format(params.local_dir, LOCAL_DATA_DIR)),
    ]
    return "".join("{} = {}\n".format(key, value) for key, value in values)


def render_launcher(storage: StorageClient, remote_dir: str, config: ConfigFile) -> str:
    """
    The script that runs on each host: unpack the generator, generate this
    host's splits, upload every table and remove the local copies.
    """
    lines = [
        "#!/bin/sh",
        "tar -zxvf {}".format(shlex.quote(config.generator_archive.name)),
        "{} {}".format(config.generator_command, shlex.quote(config.properties_name)),
    ]
    for table in TPCH_TABLES:
        lines.append(
            storage.upload_command(
                table_file_pattern(table), remote_table_dir(remote_dir, table)
            )
        )
    lines.append("rm -rf {}/*.tbl*".format(LOCAL_DATA_DIR))
    return "\n".join(lines) + "\n"


def _copy(src: pathlib.Path, dest: pathlib.Path) -> None:
    try:
        shutil.copy(src, dest)
    except OSError as ex:
        raise StagingFailure(
            "Failed to copy '{}' to '{}': {}".format(src, dest, ex)
        ) from ex


def stage_host(
    host_index: int,
    assignment: SplitAssignment,
    params: Parameters,
    staging: StagingArea,
    config: ConfigFile,
) -> pathlib.Path:
    """
    Prepares the host's working directory: the launcher script, the
    generator archive and the host's properties file. The working directory
    must not exist yet.
    """
    properties = staging.write_properties(
        host_index, assignment.host, render_properties(params, assignment)
    )

    logger.info("Copying files to host: %s", assignment.host)
    local_dir = params.local_dir
    try:
        local_dir.mkdir()
    except OSError as ex:
        raise StagingFailure(
            "Failed to create the local directory '{}': {}".format(local_dir, ex)
        ) from ex

    launcher_dest = local_dir / config.launcher_name
    _copy(staging.launcher_path, launcher_dest)
    try:
        # Equivalent to `chmod a+x`.
        mode = os.stat(launcher_dest).st_mode
        os.chmod(launcher_dest, mode | 0o111)
    except OSError as ex:
        raise StagingFailure(
            "Failed to mark '{}' as executable: {}".format(launcher_dest, ex)
        ) from ex

    _copy(config.generator_archive, local_dir / config.generator_archive.name)
    _copy(properties, local_dir / config.properties_name)
    return local_dir
