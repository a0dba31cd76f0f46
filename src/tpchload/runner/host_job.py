import logging
import multiprocessing as mp
import pathlib
import subprocess
import sys
from typing import Dict, Iterable

from tpchload.config.file import ConfigFile
from tpchload.partition import SplitAssignment
from tpchload.utils import set_up_logging

logger = logging.getLogger(__name__)


def run_launcher(
    host: str,
    local_dir: str,
    launcher_name: str,
    log_name: str,
    debug_mode: bool,
) -> None:
    """
    Runs in the host's process: executes the launcher from the host's working
    directory, sending its output to the log file.
    """
    set_up_logging(debug_mode=debug_mode)
    work_dir = pathlib.Path(local_dir)
    with open(work_dir / log_name, "w", encoding="UTF-8") as log:
        result = subprocess.run(
            ["./{}".format(launcher_name)],
            cwd=work_dir,
            stdout=log,
            stderr=subprocess.STDOUT,
            check=False,
        )
    logger.info("Data generation completed at host: %s", host)
    sys.exit(result.returncode)


class HostJob:
    """
    A running data generation job for one host.
    """

    def __init__(
        self, assignment: SplitAssignment, process: mp.process.BaseProcess
    ) -> None:
        self.assignment = assignment
        self.process = process

    @property
    def host(self) -> str:
        return self.assignment.host

    def wait(self) -> int:
        self.process.join()
        exitcode = self.process.exitcode
        return exitcode if exitcode is not None else -1


class HostJobLauncher:
    def __init__(self, config: ConfigFile, debug_mode: bool = False) -> None:
        self._config = config
        self._debug_mode = debug_mode
        # On Unix platforms, the default way to start a process is by forking,
        # which is not ideal (we do not want to duplicate this process' file
        # descriptors!).
        self._context = mp.get_context("spawn")

    def launch(self, assignment: SplitAssignment, local_dir: pathlib.Path) -> HostJob:
        """
        Starts the job and returns without waiting for it.
        """
        logger.info("Starting data generation at host: %s", assignment.host)
        process = self._context.Process(
            target=run_launcher,
            args=(
                assignment.host,
                str(local_dir),
                self._config.launcher_name,
                self._config.launcher_log_name,
                self._debug_mode,
            ),
        )
        process.start()
        return HostJob(assignment, process)


def await_all(jobs: Iterable) -> Dict[str, int]:
    """
    Waits for every job to exit. Returns each host's exit code.
    """
    exit_codes = {}
    for job in jobs:
        exitcode = job.wait()
        exit_codes[job.host] = exitcode
        if exitcode != 0:
            logger.error(
                "Data generation at host %s exited with code %d. "
                "Check the launcher's log for details.",
                job.host,
                exitcode,
            )
    return exit_codes
