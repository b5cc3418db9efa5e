import argparse

from devconf.lintstaged import run_check
from devconf.renovate import run_validation


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Repository tooling config checks")
    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)

    renovate = subparsers.add_parser("renovate", help="Validate the Renovate configuration")
    run_validation.add_arguments(renovate)

    lint = subparsers.add_parser("lint-staged", help="Check the lint-staged / prettier / ESLint setup")
    run_check.add_arguments(lint)

    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.command == "renovate":
        return run_validation.run_from_args(args)
    return run_check.run_from_args(args)


if __name__ == "__main__":
    raise SystemExit(main())
