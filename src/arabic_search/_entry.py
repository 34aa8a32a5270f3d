"""Console entry point for ``arabic-search``.

With no arguments and a non-interactive stdin the process was spawned by an
MCP client, so serve over stdio; otherwise run the CLI.
"""

from __future__ import annotations

import sys


def _spawned_by_mcp_client(argv: list[str]) -> bool:
    return len(argv) == 1 and not sys.stdin.isatty()


def main() -> None:
    if _spawned_by_mcp_client(sys.argv):
        from arabic_search.mcp.server import main as serve

        serve()
        return

    from arabic_search.cli.main import app

    app(prog_name="arabic-search")


if __name__ == "__main__":
    main()
