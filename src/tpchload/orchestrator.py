import logging
import time
from datetime import datetime
from typing import Dict, List, Optional

from tpchload.config.file import ConfigFile
from tpchload.config.params import Parameters
from tpchload.hosts import load_hosts
from tpchload.partition import SplitAssignment, partition
from tpchload.runner.host_job import HostJobLauncher, await_all
from tpchload.staging.payload import render_launcher, stage_host
from tpchload.staging.staging_area import StagingArea
from tpchload.storage.client import StorageClient
from tpchload.storage.layout import ensure_remote_layout

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Generates the data on every host and loads it into the remote directory.
    Errors raised by `run()` are fatal. Nothing is rolled back: remote
    directories and local working directories created before the error are
    left in place.
    """

    def __init__(
        self,
        params: Parameters,
        config: ConfigFile,
        storage: StorageClient,
        launcher: HostJobLauncher,
        start_time: Optional[float] = None,
    ) -> None:
        """
        `start_time` is a `time.monotonic()` reading used to report the
        elapsed time. It defaults to when `run()` is called.
        """
        self._params = params
        self._config = config
        self._storage = storage
        self._launcher = launcher
        self._start_time = start_time
        self._assignments: List[SplitAssignment] = []
        self._elapsed_s: Optional[int] = None

    @property
    def assignments(self) -> List[SplitAssignment]:
        return self._assignments

    @property
    def elapsed_s(self) -> Optional[int]:
        return self._elapsed_s

    def run(self) -> Dict[str, int]:
        """
        Returns the exit code of each host's job.
        """
        start = self._start_time if self._start_time is not None else time.monotonic()
        logger.info("Starting data generation at: %s", datetime.now().ctime())
        for line in self._params.describe().splitlines():
            logger.info("%s", line)

        # 1. Check the preconditions and set up the remote directories.
        hosts = load_hosts(self._params.host_list_path)
        ensure_remote_layout(self._storage, self._params.remote_dir)

        # 2. Render the launcher script shared by all hosts.
        staging: Optional[StagingArea] = None
        try:
            staging = StagingArea()
            staging.write_launcher(
                self._config.launcher_name,
                render_launcher(self._storage, self._params.remote_dir, self._config),
            )

            # 3. Stage and start each host's job. Staging is synchronous, so a
            # host's files are in place before its job starts.
            self._assignments = partition(self._params.num_file_splits, hosts)
            jobs = []
            for host_index, assignment in enumerate(self._assignments):
                logger.debug(
                    "Host %s generates splits %d to %d",
                    assignment.host,
                    assignment.first_split,
                    assignment.last_split,
                )
                local_dir = stage_host(
                    host_index, assignment, self._params, staging, self._config
                )
                jobs.append(self._launcher.launch(assignment, local_dir))

            # 4. Wait for the hosts to complete.
            logger.info("Waiting for the data generation to complete")
            exit_codes = await_all(jobs)
        finally:
            if staging is not None:
                staging.cleanup()

        self._elapsed_s = int(time.monotonic() - start)
        logger.info("Data generation is complete!")
        logger.info("Time taken (sec): %d", self._elapsed_s)
        return exit_codes
