import argparse
import logging
import sys

from hostredirect.app_shell.config import InvalidLogLevelError, resolve_log_level
from hostredirect.app_shell.exit_codes import ExitCode
from hostredirect.components.mapping import (
    LoadMappingsInput,
    LookupInput,
    MappingsOutput,
    run_load,
    run_lookup,
)

logger = logging.getLogger("cli")

# Error codes caused by the environment rather than the file contents
CONFIG_ERROR_CODES = {"file_not_found", "io_error"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostredirect", description="Validate and query host redirect mappings"
    )
    parser.add_argument(
        "--mapping-file",
        help="Mappings file (default: $MAPPING_FILE, then mapping.yaml)",
    )
    parser.add_argument(
        "--log-level", help="Logging level name (default: $LOG_LEVEL, then INFO)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check
    subparsers.add_parser("check", help="Validate the mappings file")

    # lookup
    lookup_parser = subparsers.add_parser("lookup", help="Resolve a host and path")
    lookup_parser.add_argument("host", help="Requested host name")
    lookup_parser.add_argument("path", help="Requested path, e.g. /docs")

    return parser


def load(mapping_file: str | None) -> MappingsOutput:
    result = run_load(LoadMappingsInput(mapping_path=mapping_file))
    for error in result.errors:
        logger.error(f"{error.code}: {error.message}")
    return result


def exit_code_for(result: MappingsOutput) -> ExitCode:
    if result.success:
        return ExitCode.OK
    if any(error.code in CONFIG_ERROR_CODES for error in result.errors):
        return ExitCode.CONFIG_ERROR
    return ExitCode.BAD_MAPPING_FILE


def handle_check(args: argparse.Namespace) -> ExitCode:
    result = load(args.mapping_file)
    if result.mappings is not None:
        hosts = result.mappings.host_names()
        print(f"Mappings valid: {len(hosts)} host(s): {', '.join(hosts)}")
    return exit_code_for(result)


def handle_lookup(args: argparse.Namespace) -> ExitCode:
    result = load(args.mapping_file)
    if result.mappings is None:
        return exit_code_for(result)

    found = run_lookup(LookupInput(host=args.host, path=args.path), mappings=result.mappings)
    if found.found:
        print(found.target)
    else:
        logger.info(f"No redirect configured for {args.host}{args.path}")
    return ExitCode.OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = resolve_log_level(args.log_level)
    except InvalidLogLevelError as e:
        print(f"CRITICAL: {e}", file=sys.stderr)
        return ExitCode.INVALID_LOGLEVEL

    logging.basicConfig(level=level)

    if args.command == "check":
        return handle_check(args)
    elif args.command == "lookup":
        return handle_lookup(args)

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
