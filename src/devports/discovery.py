"""Port discovery: listeners, process metadata, containers and service type."""

from dataclasses import dataclass

from .classifier import ServiceFlags, classify
from .console import debug
from .containers import ContainerInfo, get_container_ports
from .enrichment import enrich
from .listing import collect_listeners
from .naming import display_name
from .system import SystemScanner


@dataclass(frozen=True)
class PortRecord:
    """A listening port and everything known about its owner."""

    port: int
    pid: int
    user: str
    command: str  # Best available full command line
    display_name: str
    project_path: str | None
    working_directory: str | None
    flags: ServiceFlags
    container: ContainerInfo | None = None

    @property
    def is_dev_server(self) -> bool:
        return self.flags.is_dev_server

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}"


def discover_ports(scanner: SystemScanner | None = None) -> list[PortRecord]:
    """Discover all listening TCP ports on this host.

    Sequence:
    1. Enumerate listeners (one per port, first seen wins)
    2. Build the container port map once for the whole pass
    3. For each listener in port order: enrich, classify, correlate, name

    Every source degrades independently: no lsof means no ports, no docker
    means no containers, a vanished process keeps its short command name.

    Args:
        scanner: System scanner. Defaults to the real system.

    Returns:
        Records sorted ascending by port
    """
    scanner = scanner or SystemScanner()

    listeners = collect_listeners(scanner)
    container_ports = get_container_ports(scanner)
    debug(f"{len(listeners)} listeners, {len(container_ports)} container ports")

    records: list[PortRecord] = []
    for listener in listeners:
        enrichment = enrich(listener, scanner)
        flags = classify(enrichment.command)
        name, project = display_name(enrichment.command, enrichment.working_directory)

        records.append(
            PortRecord(
                port=listener.port,
                pid=listener.pid,
                user=listener.user,
                command=enrichment.command,
                display_name=name,
                project_path=project or enrichment.working_directory,
                working_directory=enrichment.working_directory,
                flags=flags,
                container=container_ports.get(listener.port),
            )
        )

    return records


def find_record(records: list[PortRecord], port: int) -> PortRecord | None:
    """Find the record for a port.

    Args:
        records: Records from discover_ports
        port: Port number

    Returns:
        Matching record or None
    """
    return next((record for record in records if record.port == port), None)


def split_dev_and_system(
    records: list[PortRecord],
) -> tuple[list[PortRecord], list[PortRecord]]:
    """Group records into development servers and everything else."""
    dev = [record for record in records if record.is_dev_server]
    system = [record for record in records if not record.is_dev_server]
    return dev, system
