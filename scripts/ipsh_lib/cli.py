"""
Command-line entry point: ip [-4] [-6] [--dry-run] <subcommand-grammar...>
"""

import argparse
import sys
from typing import Optional, Sequence

from ipsh_lib.commands import Family
from ipsh_lib.common import fatal
from ipsh_lib.config import PROG
from ipsh_lib.display import print_command
from ipsh_lib.executor import Executor, SystemExecutor, DryRunExecutor
from ipsh_lib.invocation import run
from ipsh_lib.parser.errors import UsageError, ExecutionError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show and manipulate routing, network devices, interfaces and tunnels",
    )
    parser.add_argument("-4", dest="inet4", action="store_true",
                        help="Restrict to IPv4")
    parser.add_argument("-6", dest="inet6", action="store_true",
                        help="Restrict to IPv6 (wins over -4)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print the parsed command instead of running it")
    parser.add_argument("tokens", nargs=argparse.REMAINDER,
                        help="OBJECT { COMMAND | help }, keywords may be abbreviated")
    return parser


def main(argv: Optional[Sequence[str]] = None, executor: Optional[Executor] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_arg_parser().parse_args(argv)
    family = Family.from_flags(args.inet4, args.inet6)

    if args.dry_run:
        executor = DryRunExecutor()
    elif executor is None:
        executor = SystemExecutor()

    try:
        output = run(args.tokens, family, executor)
    except (UsageError, ExecutionError) as e:
        fatal(PROG, str(e))
        return 1

    if args.dry_run and executor.executed:
        print_command(executor.executed[-1])
    elif output:
        print(output.rstrip("\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
