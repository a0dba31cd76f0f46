import argparse
import sys

import tpchload
import tpchload.exec.generate
import tpchload.exec.plan


def main():
    parser = argparse.ArgumentParser(
        description="tpchload: Generate TPC-H data and load it into HDFS.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print tpchload's version and exit.",
    )
    subparsers = parser.add_subparsers(title="Commands")
    tpchload.exec.generate.register_command(subparsers)
    tpchload.exec.plan.register_command(subparsers)
    args = parser.parse_args()

    if args.version:
        print("tpchload", tpchload.__version__)
        return

    if "func" not in args:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
