"""
Tests for the system and dry-run executors.
"""

import subprocess

import pytest

from ipsh_lib.commands import Family, LinkCommand, RouteCommand
from ipsh_lib.executor import DryRunExecutor, SystemExecutor, command_line
from ipsh_lib.parser.dispatcher import parse_command


@pytest.fixture
def ip_present(monkeypatch):
    monkeypatch.setattr("ipsh_lib.executor.system.shutil.which", lambda binary: f"/sbin/{binary}")


def _fake_run(returncode=0, stdout="", stderr=""):
    calls = []

    def fake(argv, **kwargs):
        calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, returncode, stdout=stdout, stderr=stderr)

    return fake, calls


class TestSystemExecutor:

    def test_argv(self):
        command = RouteCommand(action="show", family=Family.V6)
        assert SystemExecutor().argv(command) == ["ip", "-6", "route", "show"]

    @pytest.mark.parametrize("tokens,argv", [
        (["r", "add", "blackhole", "10.1.0.0/16"], ["ip", "route", "add", "blackhole", "10.1.0.0/16"]),
        (["n", "add", "proxy", "10.0.0.9", "dev", "lo"], ["ip", "neigh", "add", "proxy", "10.0.0.9", "dev", "lo"]),
    ])
    def test_argv_uses_iproute2_word_order(self, tokens, argv):
        assert SystemExecutor().argv(parse_command(tokens)) == argv

    def test_success(self, ip_present, monkeypatch):
        fake, calls = _fake_run(stdout="1: lo: <LOOPBACK,UP>\n")
        monkeypatch.setattr("ipsh_lib.executor.system.subprocess.run", fake)

        output, err = SystemExecutor(timeout=5).execute(LinkCommand(action="show"))

        assert err is None
        assert output == "1: lo: <LOOPBACK,UP>\n"
        argv, kwargs = calls[0]
        assert argv == ["ip", "link", "show"]
        assert kwargs["timeout"] == 5
        assert kwargs["capture_output"] is True

    def test_failure_reports_stderr(self, ip_present, monkeypatch):
        fake, _ = _fake_run(returncode=2, stderr="RTNETLINK answers: File exists\n")
        monkeypatch.setattr("ipsh_lib.executor.system.subprocess.run", fake)

        _, err = SystemExecutor().execute(RouteCommand(action="add", prefix="default"))
        assert err == "RTNETLINK answers: File exists"

    def test_failure_without_stderr(self, ip_present, monkeypatch):
        fake, _ = _fake_run(returncode=1)
        monkeypatch.setattr("ipsh_lib.executor.system.subprocess.run", fake)

        _, err = SystemExecutor().execute(LinkCommand())
        assert err == "exit status 1"

    def test_timeout(self, ip_present, monkeypatch):
        def fake(argv, **kwargs):
            raise subprocess.TimeoutExpired(argv, kwargs["timeout"])

        monkeypatch.setattr("ipsh_lib.executor.system.subprocess.run", fake)
        assert SystemExecutor().execute(LinkCommand()) == ("", "Command timed out")

    def test_binary_missing(self, monkeypatch):
        monkeypatch.setattr("ipsh_lib.executor.system.shutil.which", lambda binary: None)
        assert SystemExecutor(binary="ip-missing").execute(LinkCommand()) == ("", "ip-missing not found")


class TestDryRun:

    def test_command_line(self):
        command = RouteCommand(action="add", family=Family.V4, prefix="default",
                               options={"via": "1.1.1.1"})
        assert command_line(command) == "ip -4 route add to default via 1.1.1.1"

    def test_quoting(self):
        command = LinkCommand(action="set", device="eth0", options={"alias": "uplink to isp"})
        assert command_line(command) == "ip link set dev eth0 alias 'uplink to isp'"

    def test_records_commands(self):
        executor = DryRunExecutor()
        command = LinkCommand()
        assert executor.execute(command) == ("ip link show", None)
        assert executor.executed == [command]
