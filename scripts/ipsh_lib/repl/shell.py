"""
Interactive shell for ipsh.

Each line is one `ip` invocation without the leading `ip`. Lines are parsed
with a fresh parser context, so nothing leaks from one command into the next.
"""

import argparse
import shlex
from typing import Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console

from ipsh_lib.commands import Family
from ipsh_lib.common import Colors, error, info, log, warn
from ipsh_lib.config import HISTORY_FILE
from ipsh_lib.display import expectation_table
from ipsh_lib.executor import DryRunExecutor, SystemExecutor
from ipsh_lib.invocation import run
from ipsh_lib.parser.context import ParseState
from ipsh_lib.parser.diagnostics import Diagnostic
from ipsh_lib.parser.dispatcher import TOP_LEVEL, probe
from ipsh_lib.parser.errors import UsageError, ExecutionError
from .completer import GrammarCompleter
from .context import ShellContext, get_prompt_text

FAMILIES = {
    "4": Family.V4,
    "6": Family.V6,
    "all": Family.ALL,
}


def cmd_help() -> None:
    """Show shell help."""
    print()
    print(f"{Colors.BOLD}Available Commands:{Colors.NC}")
    print()
    print(f"  {Colors.CYAN}Shell:{Colors.NC}")
    print("    help              Show this help")
    print("    family 4|6|all    Restrict following commands to an address family")
    print("    exit, quit        Exit the shell")
    print()
    print(f"  {Colors.CYAN}Objects:{Colors.NC}")
    for keyword in TOP_LEVEL:
        print(f"    {keyword}")
    print()
    print("  Keywords may be abbreviated. End a line with '?' to see what may follow.")
    print()


def cmd_family(ctx: ShellContext, args: list[str]) -> None:
    """Set the address family for following commands."""
    if len(args) != 1 or args[0] not in FAMILIES:
        warn("Usage: family 4|6|all")
        return
    ctx.family = FAMILIES[args[0]]
    log(f"Address family: {ctx.family.value}")


def cmd_expect(ctx: ShellContext, tokens: list[str], console: Console) -> None:
    """Show what the grammar accepts after `tokens`."""
    probed = probe(tokens, ctx.family)
    if probed.state is ParseState.FAILED and not probed.stream.at_end():
        error(str(Diagnostic.from_context(probed)))
        return
    console.print(expectation_table(probed))


def handle_line(line: str, ctx: ShellContext, console: Console) -> bool:
    """Handle one input line. Returns False when the shell should exit."""
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        error(f"Cannot split line: {e}")
        return True

    if not tokens:
        return True

    command = tokens[0]
    if command in ("exit", "quit"):
        return False
    if command == "help" and len(tokens) == 1:
        cmd_help()
        return True
    if command == "family":
        cmd_family(ctx, tokens[1:])
        return True
    if tokens[-1] == "?":
        cmd_expect(ctx, tokens[:-1], console)
        return True

    try:
        output = run(tokens, ctx.family, ctx.executor)
    except (UsageError, ExecutionError) as e:
        error(str(e))
        return True

    if output:
        print(output.rstrip("\n"))
    return True


def run_repl(argv: Optional[Sequence[str]] = None) -> int:
    """Main REPL entry point."""
    parser = argparse.ArgumentParser(description="Interactive ip shell")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print commands instead of running them")
    args = parser.parse_args(argv)

    print()
    print(f"{Colors.BOLD}ipsh{Colors.NC}")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    if args.dry_run:
        info("Dry run: commands are printed, not executed")
        print()

    ctx = ShellContext(executor=DryRunExecutor() if args.dry_run else SystemExecutor())
    console = Console()
    session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        completer=GrammarCompleter(ctx),
    )

    while True:
        try:
            line = session.prompt(get_prompt_text(ctx))
            if not handle_line(line, ctx, console):
                break
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    print("Goodbye!")
    return 0
