#!/usr/bin/env python3
"""
Hollow CLI - describe stub types or serve the inspection API
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from hollow.cache import TypeCache, default_cache
from hollow.core.errors import HollowError
from hollow.introspection import resolve_contract
from hollow.output.json_formatter import StubReportFormatter
from hollow.utils.log import configure_logging


def describe(references: List[str], indent: int = 2, output: Optional[str] = None,
             cache: Optional[TypeCache] = None) -> int:
    """
    Synthesize stubs for each contract reference and print a JSON report.

    Args:
        references: Contracts as 'package.module:QualName'
        indent: JSON indentation
        output: Optional file to write the report to instead of stdout
        cache: Registry to use (default: the process-wide registry)

    Returns:
        Process exit code
    """
    registry = cache if cache is not None else default_cache
    formatter = StubReportFormatter(source=", ".join(references))

    for reference in references:
        try:
            formatter.add_stub(registry.get_or_create(resolve_contract(reference)))
        except HollowError as e:
            print(f"❌ Error: {e}", file=sys.stderr)
            return 1

    if output:
        formatter.save_to_file(output, indent=indent)
        print(f"Report written to {output}")
    else:
        print(formatter.to_json_string(indent=indent))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="hollow",
        description="Run-time stub types for abstract classes and protocols",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Describe the stub for a protocol
    hollow describe shapes.contracts:Point

    # Several contracts, written to a file
    hollow describe shapes.contracts:Point shapes.contracts:Shape -o stubs.json

    # Serve the inspection API
    hollow serve --port 8000
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log synthesis details")
    commands = parser.add_subparsers(dest="command", required=True)

    describe_cmd = commands.add_parser("describe", help="Print the stub type built for each contract")
    describe_cmd.add_argument("contracts", nargs="+", help="Contract as 'package.module:QualName'")
    describe_cmd.add_argument("--indent", type=int, default=2, help="JSON indentation")
    describe_cmd.add_argument("-o", "--output", help="Write the report to this file")

    serve_cmd = commands.add_parser("serve", help="Run the inspection API")
    serve_cmd.add_argument("--host", help="Bind address (or HOLLOW_HOST)")
    serve_cmd.add_argument("--port", type=int, help="Port (or HOLLOW_PORT)")

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    if args.command == "describe":
        return describe(args.contracts, indent=args.indent, output=args.output)

    from hollow.server.app import run
    run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
