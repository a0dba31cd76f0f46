import argparse
import logging
import sys
import time

from tpchload.config.file import ConfigFile
from tpchload.config.params import PARAMETER_DOCS, USAGE, validate
from tpchload.errors import InvalidConfigFile, TpchLoadError, UsageError
from tpchload.orchestrator import Orchestrator
from tpchload.runner.host_job import HostJobLauncher
from tpchload.storage.client import HadoopFsClient
from tpchload.utils import set_up_logging

logger = logging.getLogger(__name__)

FAILURE_EXIT_CODE = -1


def register_parameters(parser) -> None:
    parser.add_argument(
        "--config-file",
        type=str,
        help="Path to a tpchload configuration file (optional).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Set to enable debug logging.",
    )
    # The count is checked by `validate()` so that a wrong number of
    # parameters is reported the same way as any other invalid parameter.
    parser.add_argument(
        "parameters",
        nargs="*",
        metavar="PARAM",
        help=USAGE,
    )


def register_command(subparsers) -> None:
    parser = subparsers.add_parser(
        "generate",
        help="Generate TPC-H data and load it into HDFS.",
        epilog=PARAMETER_DOCS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    register_parameters(parser)
    parser.set_defaults(func=main)


def run(args) -> int:
    start = time.monotonic()
    try:
        config = ConfigFile.load(args.config_file)
    except InvalidConfigFile as ex:
        # The log file location is unknown, so only log to the console.
        set_up_logging(debug_mode=args.debug)
        logger.error("ERROR: %s", ex.message())
        return FAILURE_EXIT_CODE

    set_up_logging(
        filename=config.log_file,
        debug_mode=args.debug,
        also_console=True,
    )

    try:
        params = validate(args.parameters, prog="tpchload generate")
        storage = HadoopFsClient(config.hadoop_home)
        orchestrator = Orchestrator(
            params,
            config,
            storage,
            HostJobLauncher(config, args.debug),
            start_time=start,
        )
        orchestrator.run()
        return 0
    except UsageError as ex:
        print(ex.message())
        return FAILURE_EXIT_CODE
    except TpchLoadError as ex:
        logger.error("ERROR: %s", ex.message())
        return FAILURE_EXIT_CODE


# This method is called by `tpchload.__main__.main`.
def main(args) -> None:
    sys.exit(run(args))
