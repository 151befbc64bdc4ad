"""CLI entrypoints for docresolver commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .models import DocFqn, DocSig, DocSigPair
from .resolver import UriResolver


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docresolver",
        description="Locate documentation for Scala and Java symbols.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .docresolver.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the documentation URI for a symbol.",
    )
    _add_verbose_option(resolve_parser, suppress_default=True)
    resolve_parser.add_argument("pack", help="Dotted package name, e.g. scala.collection.")
    resolve_parser.add_argument(
        "type_name", help="Type name, or 'package' for the package page."
    )
    resolve_parser.add_argument("--member", help="Member anchor, e.g. 'map[B](f:A=>B):List[B]'.")
    resolve_parser.add_argument("--java-pack", help="Package under javadoc naming, if different.")
    resolve_parser.add_argument("--java-type", help="Type under javadoc naming, if different.")
    resolve_parser.add_argument("--java-member", help="Member under javadoc naming, if different.")

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan the configured doc archives and report their flavors.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve resolution queries over HTTP.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def _sig_pair_from_args(args: argparse.Namespace) -> DocSigPair:
    scala = DocSig(DocFqn(args.pack, args.type_name), args.member)
    java = DocSig(
        DocFqn(args.java_pack or args.pack, args.java_type or args.type_name),
        args.java_member or args.member,
    )
    return DocSigPair(scala=scala, java=java)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docresolver commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    resolver = UriResolver.from_config(config)

    if args.command == "resolve":
        uri = resolver.resolve(_sig_pair_from_args(args))
        if uri is None:
            parser.exit(1, "not found\n")
        print(uri)
    elif args.command == "scan":
        catalog = resolver.catalog
        for name in catalog.archive_name_to_archive:
            print(f"{name}\t{catalog.flavor_of[name].value}")
        print(f"{len(catalog.path_to_archive)} pages indexed")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(resolver, host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
