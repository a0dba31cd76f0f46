import pathlib
import pytest
from typing import Dict, List

from tpchload.config.file import ConfigFile
from tpchload.partition import SplitAssignment
from tpchload.storage.client import DirectoryStatus, StorageClient


class FakeStorage(StorageClient):
    def __init__(
        self,
        status: DirectoryStatus = DirectoryStatus.NotFound,
        fail_mkdir_on: str | None = None,
    ) -> None:
        self.status = status
        self.fail_mkdir_on = fail_mkdir_on
        self.created: List[str] = []
        self.stat_calls: List[str] = []

    def directory_status(self, path: str) -> DirectoryStatus:
        self.stat_calls.append(path)
        return self.status

    def mkdir(self, path: str) -> bool:
        if path == self.fail_mkdir_on:
            return False
        self.created.append(path)
        return True

    def upload_command(self, local_pattern: str, remote_dir: str) -> str:
        return "upload {} {}".format(local_pattern, remote_dir)


class FakeJob:
    def __init__(self, assignment: SplitAssignment, exitcode: int) -> None:
        self.assignment = assignment
        self.exitcode = exitcode
        self.waited = False

    @property
    def host(self) -> str:
        return self.assignment.host

    def wait(self) -> int:
        self.waited = True
        return self.exitcode


class FakeLauncher:
    def __init__(self, exitcode: int = 0) -> None:
        self.exitcode = exitcode
        self.launched: List[FakeJob] = []
        self.local_dirs: List[pathlib.Path] = []

    def launch(self, assignment: SplitAssignment, local_dir: pathlib.Path) -> FakeJob:
        job = FakeJob(assignment, self.exitcode)
        self.launched.append(job)
        self.local_dirs.append(local_dir)
        return job


@pytest.fixture
def make_storage():
    return FakeStorage


@pytest.fixture
def make_launcher():
    return FakeLauncher


@pytest.fixture
def make_job():
    return FakeJob


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def config(tmp_path: pathlib.Path) -> ConfigFile:
    archive = tmp_path / "tpch_data_gen.tar.gz"
    archive.write_bytes(b"not really an archive")
    raw: Dict[str, str] = {
        "hadoop_home": "/opt/hadoop",
        "generator_archive": str(archive),
    }
    config_path = tmp_path / "tpchload.yml"
    config_path.write_text(
        "".join("{}: {}\n".format(key, value) for key, value in raw.items())
    )
    return ConfigFile.load(config_path)


@pytest.fixture
def host_list(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "hosts.txt"
    path.write_text("localhost\n")
    return path
