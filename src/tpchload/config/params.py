import math
import pathlib
from dataclasses import dataclass
from typing import Sequence

from tpchload.errors import (
    InvalidScaleFactor,
    InvalidSplitCount,
    InvalidZipfFactor,
    MissingHostList,
    UsageError,
)

PARAMETER_DOCS = """  scale_factor: TPCH Scale factor (GB of data to generate)
  num_files:    The number of files to generate for each table
  zipf_factor:  Zipfian distribution factor (0-4, 0 means uniform)
  host_list:    File containing a single line that says localhost
  local_dir:    Local directory to use in the host machines
  hdfs_dir:     HDFS directory to store the generated data"""

USAGE = "scale_factor num_files zipf_factor host_list local_dir hdfs_dir"

MAX_ZIPF_FACTOR = 4


@dataclass(frozen=True)
class Parameters:
    scale_factor: float
    num_file_splits: int
    zipf_factor: int
    host_list_path: pathlib.Path
    local_dir: pathlib.Path
    remote_dir: str

    def describe(self) -> str:
        return "\n".join(
            [
                "Input Parameters:",
                "  Scale Factor:    {}".format(format_number(self.scale_factor)),
                "  Number of Files: {}".format(self.num_file_splits),
                "  ZIPF Factor:     {}".format(self.zipf_factor),
                "  Host List:       {}".format(self.host_list_path),
                "  Local Directory: {}".format(self.local_dir),
                "  HDFS Directory:  {}".format(self.remote_dir),
            ]
        )


def format_number(value: float) -> str:
    # Scale factors like "1" should be handed to the generator as "1", not "1.0".
    if value.is_integer():
        return str(int(value))
    return repr(value)


def usage_message(prog: str) -> str:
    return "Usage: {} {}\n{}".format(prog, USAGE, PARAMETER_DOCS)


def validate(args: Sequence[str], prog: str = "tpchload generate") -> Parameters:
    """
    Parses and validates the six positional parameters. All checks happen
    before any side effect takes place.
    """
    if len(args) != 6:
        raise UsageError(usage_message(prog))

    raw_scale, raw_splits, raw_zipf, host_list, local_dir, remote_dir = args

    try:
        scale_factor = float(raw_scale)
    except ValueError as ex:
        raise InvalidScaleFactor(
            "The scale factor must be a number (got '{}')".format(raw_scale)
        ) from ex
    if not math.isfinite(scale_factor) or scale_factor <= 0:
        raise InvalidScaleFactor("The scale factor must be greater than 0")

    try:
        num_file_splits = int(raw_splits)
    except ValueError as ex:
        raise InvalidSplitCount(
            "The number of files must be an integer (got '{}')".format(raw_splits)
        ) from ex
    # Keeps each generated file below ~2GB.
    if num_file_splits < scale_factor / 2 or num_file_splits < 1:
        raise InvalidSplitCount(
            "The number of files must be greater than half the scale factor"
        )

    try:
        zipf_factor = int(raw_zipf)
    except ValueError as ex:
        raise InvalidZipfFactor(
            "The zipf factor must be an integer (got '{}')".format(raw_zipf)
        ) from ex
    if zipf_factor < 0 or zipf_factor > MAX_ZIPF_FACTOR:
        raise InvalidZipfFactor(
            "The zipf factor must be between 0 and {}".format(MAX_ZIPF_FACTOR)
        )

    host_list_path = pathlib.Path(host_list)
    if not host_list_path.exists():
        raise MissingHostList("The file '{}' does not exist".format(host_list))

    return Parameters(
        scale_factor=scale_factor,
        num_file_splits=num_file_splits,
        zipf_factor=zipf_factor,
        host_list_path=host_list_path,
        local_dir=pathlib.Path(local_dir),
        remote_dir=remote_dir,
    )
