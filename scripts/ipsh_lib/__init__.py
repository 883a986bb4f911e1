"""
ipsh_lib - Shorthand `ip` command interpreter

This package contains:
- commands: Command dataclasses and the address family selector
- parser/: Token stream, prefix matcher, context, diagnostics, dispatcher
- grammar/: Per-subcommand productions
- executor/: Execution collaborators (iproute2, dry run)
- invocation: Parse-then-execute for one invocation
- display: Rich rendering of commands and expectation sets
- cli: `ipsh` entry point
- repl/: Interactive shell
"""

__version__ = "0.1.0"
