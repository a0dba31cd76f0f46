import os
import pathlib
import pytest

from tpchload.config.params import Parameters
from tpchload.errors import StagingFailure
from tpchload.partition import SplitAssignment
from tpchload.staging.payload import render_launcher, render_properties, stage_host
from tpchload.staging.staging_area import StagingArea


def _params(local_dir: pathlib.Path, scale_factor: float = 1.0) -> Parameters:
    return Parameters(
        scale_factor=scale_factor,
        num_file_splits=4,
        zipf_factor=1,
        host_list_path=pathlib.Path("hosts.txt"),
        local_dir=local_dir,
        remote_dir="/data/tpch1",
    )


def test_render_properties():
    text = render_properties(
        _params(pathlib.Path("/tmp/work")), SplitAssignment("localhost", 2, 3)
    )
    assert text.splitlines() == [
        "scaling_factor = 1",
        "num_file_splits = 4",
        "first_file_split = 2",
        "last_file_split = 3",
        "zipf = 1",
        "tpch_home = /tmp/work/data",
    ]

    fractional = render_properties(
        _params(pathlib.Path("/tmp/work"), 0.1), SplitAssignment("localhost", 1, 4)
    )
    assert fractional.startswith("scaling_factor = 0.1\n")


def test_render_launcher(storage, config):
    script = render_launcher(storage, "/data/tpch1", config)
    lines = script.splitlines()
    assert lines[0] == "#!/bin/sh"
    assert lines[1] == "tar -zxvf tpch_data_gen.tar.gz"
    assert lines[2] == "perl tpch_gen_data.pl data.properties"
    uploads = [line for line in lines if line.startswith("upload ")]
    assert len(uploads) == 8
    assert "upload data/lineitem.tbl* /data/tpch1/lineitem" in uploads
    assert "upload data/region.tbl* /data/tpch1/region" in uploads
    assert lines[-1] == "rm -rf data/*.tbl*"


def test_stage_host(tmp_path, storage, config):
    staging = StagingArea(tmp_path)
    staging.write_launcher(
        config.launcher_name, render_launcher(storage, "/data/tpch1", config)
    )
    local_dir = tmp_path / "work"
    params = _params(local_dir)

    result = stage_host(0, SplitAssignment("localhost", 1, 4), params, staging, config)
    assert result == local_dir
    assert sorted(p.name for p in local_dir.iterdir()) == [
        "data.properties",
        "gen_and_load.sh",
        "tpch_data_gen.tar.gz",
    ]
    assert os.access(local_dir / "gen_and_load.sh", os.X_OK)
    assert "last_file_split = 4" in (local_dir / "data.properties").read_text()


def test_stage_host_requires_new_directory(tmp_path, storage, config):
    staging = StagingArea(tmp_path)
    staging.write_launcher(config.launcher_name, "#!/bin/sh\n")
    local_dir = tmp_path / "work"
    local_dir.mkdir()

    with pytest.raises(StagingFailure):
        stage_host(
            0, SplitAssignment("localhost", 1, 4), _params(local_dir), staging, config
        )


def test_stage_host_missing_archive(tmp_path, config):
    (tmp_path / "tpch_data_gen.tar.gz").unlink()
    staging = StagingArea(tmp_path)
    staging.write_launcher(config.launcher_name, "#!/bin/sh\n")

    with pytest.raises(StagingFailure):
        stage_host(
            0,
            SplitAssignment("localhost", 1, 4),
            _params(tmp_path / "work"),
            staging,
            config,
        )


def test_staging_area_cleanup(tmp_path):
    staging = StagingArea(tmp_path)
    launcher = staging.write_launcher("gen_and_load.sh", "#!/bin/sh\n")
    first = staging.write_properties(0, "localhost", "a = 1\n")
    second = staging.write_properties(1, "other", "a = 2\n")
    assert first != second
    assert os.access(launcher, os.X_OK)

    staging.cleanup()
    assert not staging.root.exists()
    # Cleaning up twice is harmless.
    staging.cleanup()


def test_staging_area_launcher_not_written(tmp_path):
    staging = StagingArea(tmp_path)
    with pytest.raises(RuntimeError):
        _ = staging.launcher_path
    staging.cleanup()
