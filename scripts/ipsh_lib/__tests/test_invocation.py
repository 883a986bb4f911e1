"""
Tests for parse-then-execute.
"""

import pytest

from ipsh_lib.commands import Family, RouteCommand
from ipsh_lib.executor import DryRunExecutor, Executor
from ipsh_lib.grammar import USAGE
from ipsh_lib.invocation import run
from ipsh_lib.parser.errors import ExecutionError, UsageError


class FailingExecutor(Executor):

    def execute(self, command):
        return "", "RTNETLINK answers: Operation not permitted"


class TestRun:

    def test_executes_parsed_command(self):
        executor = DryRunExecutor()
        output = run(["r", "add", "default", "via", "1.1.1.1"], Family.V4, executor)
        assert output == "ip -4 route add to default via 1.1.1.1"
        assert executor.executed == [RouteCommand(action="add", family=Family.V4, prefix="default",
                                                  options={"via": "1.1.1.1"})]

    @pytest.mark.parametrize("keyword", sorted(USAGE))
    def test_help_is_not_executed(self, keyword):
        executor = DryRunExecutor()
        assert run([keyword, "help"], Family.ALL, executor) == USAGE[keyword]
        assert executor.executed == []

    def test_usage_error_is_not_executed(self):
        executor = DryRunExecutor()
        with pytest.raises(UsageError):
            run(["link", "xyz"], Family.ALL, executor)
        assert executor.executed == []

    def test_execution_error_names_subcommand(self):
        with pytest.raises(ExecutionError) as exc:
            run(["l", "se", "eth0", "up"], Family.ALL, FailingExecutor())
        assert exc.value.subcommand == "link"
        assert str(exc.value) == "link: RTNETLINK answers: Operation not permitted"
