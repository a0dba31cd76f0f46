import argparse
import logging
import sys
from tabulate import tabulate

from tpchload.config.params import PARAMETER_DOCS, validate
from tpchload.errors import TpchLoadError, UsageError
from tpchload.exec.generate import FAILURE_EXIT_CODE, register_parameters
from tpchload.hosts import load_hosts
from tpchload.partition import partition
from tpchload.utils import set_up_logging

logger = logging.getLogger(__name__)


def register_command(subparsers) -> None:
    parser = subparsers.add_parser(
        "plan",
        help="Show how the file splits would be assigned to the hosts, "
        "without generating any data.",
        epilog=PARAMETER_DOCS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    register_parameters(parser)
    parser.set_defaults(func=main)


def run(args) -> int:
    set_up_logging(debug_mode=args.debug)
    try:
        params = validate(args.parameters, prog="tpchload plan")
        hosts = load_hosts(params.host_list_path)
    except UsageError as ex:
        print(ex.message())
        return FAILURE_EXIT_CODE
    except TpchLoadError as ex:
        logger.error("ERROR: %s", ex.message())
        return FAILURE_EXIT_CODE

    assignments = partition(params.num_file_splits, hosts)
    print(params.describe())
    print()
    print(
        tabulate(
            [
                (a.host, a.first_split, a.last_split, a.num_splits)
                for a in assignments
            ],
            headers=["Host", "First Split", "Last Split", "Splits"],
            tablefmt="simple_grid",
        )
    )
    return 0


def main(args) -> None:
    sys.exit(run(args))
