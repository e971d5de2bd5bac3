"""Tests for enrichment module."""

from conftest import FakeScanner

from devports.enrichment import _parse_cwd, enrich
from devports.listing import Listener

LISTENER = Listener(pid=42, command="node", user="dev", port=5173)


def test_enrich_full_command_and_cwd():
    """Test that both lookups are applied."""
    scanner = FakeScanner(
        command_lines={42: "node /work/shop/node_modules/.bin/vite\n"},
        cwds={42: "/work/shop"},
    )
    enrichment = enrich(LISTENER, scanner)

    assert enrichment.command == "node /work/shop/node_modules/.bin/vite"
    assert enrichment.working_directory == "/work/shop"


def test_enrich_command_lookup_fails():
    """Test fallback to the short command when ps fails."""
    scanner = FakeScanner(cwds={42: "/work/shop"})
    enrichment = enrich(LISTENER, scanner)

    assert enrichment.command == "node"
    assert enrichment.working_directory == "/work/shop"


def test_enrich_blank_command_falls_back():
    """Test that an empty ps result counts as a miss."""
    scanner = FakeScanner(command_lines={42: "   \n"})
    assert enrich(LISTENER, scanner).command == "node"


def test_enrich_cwd_lookup_fails():
    """Test that a cwd miss leaves the working directory unset."""
    scanner = FakeScanner(command_lines={42: "node server.js"})
    enrichment = enrich(LISTENER, scanner)

    assert enrichment.command == "node server.js"
    assert enrichment.working_directory is None


def test_enrich_single_attempt_per_lookup():
    """Test that each lookup runs exactly once."""
    scanner = FakeScanner()
    enrich(LISTENER, scanner)

    assert scanner.calls == ["ps 42", "cwd 42"]


def test_parse_cwd_ignores_other_descriptors():
    """Test that only the cwd descriptor's name is used."""
    output = "p42\nftxt\nn/usr/bin/node\nfcwd\nn/home/dev/site\n"
    assert _parse_cwd(output) == "/home/dev/site"


def test_parse_cwd_empty():
    """Test parsing empty lsof output."""
    assert _parse_cwd("") is None
