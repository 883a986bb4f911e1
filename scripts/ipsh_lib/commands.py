"""
Command dataclasses for ipsh.

One dataclass per subcommand. A parsed invocation is exactly one of these;
`to_tokens()` re-serializes it into its fully-spelled token form so that
parsing the result yields an equal command.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import ClassVar, Optional, Union


OptionValue = Union[str, tuple[str, ...]]


class Family(Enum):
    """Address family selector resolved from the -4/-6 flags."""
    ALL = "all"
    V4 = "inet"
    V6 = "inet6"

    @property
    def flag(self) -> Optional[str]:
        """Command-line flag selecting this family (None for ALL)."""
        return {Family.V4: "-4", Family.V6: "-6"}.get(self)

    @classmethod
    def from_flags(cls, inet4: bool, inet6: bool) -> "Family":
        """Resolve the selector; -6 wins when both flags are given."""
        if inet6:
            return cls.V6
        if inet4:
            return cls.V4
        return cls.ALL


def option_tokens(options: dict[str, OptionValue]) -> list[str]:
    """Flatten an options mapping into `keyword value...` tokens."""
    tokens = []
    for keyword, value in options.items():
        tokens.append(keyword)
        if isinstance(value, tuple):
            tokens.extend(value)
        else:
            tokens.append(value)
    return tokens


@dataclass
class Command:
    """Base for every parsed invocation."""
    action: str = "show"
    family: Family = Family.ALL
    options: dict[str, OptionValue] = field(default_factory=dict)
    flags: list[str] = field(default_factory=list)

    keyword: ClassVar[str] = ""

    def to_tokens(self) -> list[str]:
        """Canonical, non-abbreviated token form (without family flags)."""
        tokens = [self.keyword, self.action]
        if self.action == "help":
            return tokens
        tokens.extend(self._target_tokens())
        tokens.extend(option_tokens(self.options))
        tokens.extend(self.flags)
        tokens.extend(self._tail_tokens())
        return tokens

    def to_argv(self) -> list[str]:
        """Canonical tokens preceded by the family flag, if any."""
        argv = [self.family.flag] if self.family.flag else []
        return argv + self.to_tokens()

    def _target_tokens(self) -> list[str]:
        return []

    def _tail_tokens(self) -> list[str]:
        return []

    def describe(self) -> dict[str, str]:
        """Field name to printable value, skipping empty fields."""
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value in (None, False, [], {}, ()):
                continue
            if isinstance(value, Family):
                value = value.value
            elif isinstance(value, dict):
                value = " ".join(option_tokens(value))
            elif isinstance(value, list):
                value = " ".join(value)
            out[f.name] = str(value)
        return out


@dataclass
class AddressCommand(Command):
    """ip address: protocol addresses on devices."""
    address: Optional[str] = None
    device: Optional[str] = None

    keyword: ClassVar[str] = "address"

    def _target_tokens(self) -> list[str]:
        tokens = [self.address] if self.address is not None else []
        if self.device is not None:
            tokens += ["dev", self.device]
        return tokens


@dataclass
class LinkCommand(Command):
    """ip link: network devices."""
    device: Optional[str] = None
    link_type: Optional[str] = None
    type_args: list[str] = field(default_factory=list)

    keyword: ClassVar[str] = "link"

    def _target_tokens(self) -> list[str]:
        if self.device is None:
            return []
        # `ip link add` names the new device, everything else selects one
        return ["name" if self.action == "add" else "dev", self.device]

    def _tail_tokens(self) -> list[str]:
        if self.link_type is None:
            return []
        return ["type", self.link_type] + self.type_args


@dataclass
class RouteCommand(Command):
    """ip route: routing table entries."""
    route_type: Optional[str] = None
    prefix: Optional[str] = None

    keyword: ClassVar[str] = "route"

    def _target_tokens(self) -> list[str]:
        if self.prefix is None:
            return []
        # iproute2 takes `to TYPE PREFIX` or `TYPE PREFIX`, never `TYPE to PREFIX`
        if self.route_type is not None:
            return [self.route_type, self.prefix]
        return ["to", self.prefix]


@dataclass
class NeighborCommand(Command):
    """ip neigh: neighbour (ARP/NDISC) entries."""
    address: Optional[str] = None
    device: Optional[str] = None
    # `proxy ADDR`: the entry is a proxy entry for ADDR
    proxy: bool = False

    keyword: ClassVar[str] = "neigh"

    def _target_tokens(self) -> list[str]:
        tokens = []
        if self.address is not None:
            tokens = ["proxy" if self.proxy else "to", self.address]
        if self.device is not None:
            tokens += ["dev", self.device]
        return tokens


@dataclass
class MonitorCommand(Command):
    """ip monitor: watch netlink messages."""
    action: str = "monitor"
    objects: list[str] = field(default_factory=list)

    keyword: ClassVar[str] = "monitor"

    def to_tokens(self) -> list[str]:
        if self.action == "help":
            return [self.keyword, "help"]
        return ([self.keyword] + self.objects + option_tokens(self.options)
                + self.flags)


@dataclass
class TunnelCommand(Command):
    """ip tunnel: IP-in-IP, GRE and friends."""
    name: Optional[str] = None

    keyword: ClassVar[str] = "tunnel"

    def _target_tokens(self) -> list[str]:
        return ["name", self.name] if self.name is not None else []


@dataclass
class TCPMetricsCommand(Command):
    """ip tcp_metrics: cached TCP connection parameters."""
    address: Optional[str] = None

    keyword: ClassVar[str] = "tcp_metrics"

    def _target_tokens(self) -> list[str]:
        return ["address", self.address] if self.address is not None else []


@dataclass
class XfrmCommand(Command):
    """ip xfrm: IPsec states and policies."""
    kind: Optional[str] = None
    objects: list[str] = field(default_factory=list)
    template: list[str] = field(default_factory=list)

    keyword: ClassVar[str] = "xfrm"

    def to_tokens(self) -> list[str]:
        if self.kind is None:
            return [self.keyword, self.action]
        if self.kind == "monitor":
            return [self.keyword, "monitor"] + self.objects
        tokens = [self.keyword, self.kind, self.action]
        if self.action == "help":
            return tokens
        tokens += option_tokens(self.options) + self.flags
        if self.template:
            tokens += ["tmpl"] + self.template
        return tokens

