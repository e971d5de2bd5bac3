"""Map published host ports to running Docker containers."""

import re
from dataclasses import dataclass

from .console import debug
from .system import SystemScanner

# "0.0.0.0:3000->3000/tcp", ":::3000->3000/tcp", "[::]:3000->3000/tcp"
HOST_PORT_MAPPING = re.compile(r"(?:\d+\.\d+\.\d+\.\d+|\[::\]|::):(\d+)->")


@dataclass(frozen=True)
class ContainerInfo:
    """A container publishing a host port."""

    name: str
    image: str


def parse_container_ports(text: str) -> dict[int, ContainerInfo]:
    """Parse ``docker ps`` rows of ``name<TAB>ports<TAB>image``.

    When a host port appears against more than one container the last row
    wins; docker does not promise an ordering.

    Args:
        text: Raw docker ps output

    Returns:
        Mapping of host port to container
    """
    port_map: dict[int, ContainerInfo] = {}

    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) < 2:
            continue
        name, ports = fields[0], fields[1]
        image = fields[2] if len(fields) > 2 else ""
        info = ContainerInfo(name=name.strip(), image=image.strip())

        for match in HOST_PORT_MAPPING.finditer(ports):
            port_map[int(match.group(1))] = info

    return port_map


def get_container_ports(scanner: SystemScanner) -> dict[int, ContainerInfo]:
    """Query docker once and build the port map for a discovery cycle.

    Docker not installed or not running degrades to an empty map.

    Args:
        scanner: System scanner

    Returns:
        Mapping of host port to container
    """
    output = scanner.container_table()
    if output is None:
        debug("Docker not available, skipping container correlation")
        return {}
    return parse_container_ports(output)
