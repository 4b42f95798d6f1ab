"""Entry point: python -m odata_swagger

Reads OData $metadata (file or service URL), writes generated/swagger.json
and generated/index.html.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import httpx

from .codegen import generate
from .convert import convert
from .errors import MetadataError
from .loader import load_metadata, parse_metadata
from .model import Options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="odata_swagger",
        description="Generate a Swagger 2.0 document from OData service metadata",
    )
    parser.add_argument(
        "source", nargs="?", default=os.environ.get("ODATA_METADATA"),
        help="Path to a $metadata file or a service URL (env: ODATA_METADATA)",
    )
    parser.add_argument(
        "--host", default=os.environ.get("ODATA_HOST"),
        help="Value for the document's host field (env: ODATA_HOST)",
    )
    parser.add_argument(
        "--base-path", default=os.environ.get("ODATA_BASE_PATH"),
        help="Value for the document's basePath field (env: ODATA_BASE_PATH)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("generated"),
        help="Output directory (default: generated)",
    )
    parser.add_argument("--no-ui", action="store_true", help="Skip index.html")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.source:
        parser.error("a metadata source is required (argument or ODATA_METADATA)")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        entity_sets = parse_metadata(load_metadata(args.source))
    except (MetadataError, httpx.HTTPError) as e:
        parser.exit(1, f"error: {e}\n")

    document = convert(entity_sets, Options(host=args.host, base_path=args.base_path))
    written = generate(document, args.output, ui=not args.no_ui)

    print(
        f"Generated {written[0]} "
        f"({len(document['paths'])} paths, {len(document['definitions'])} definitions)"
    )


if __name__ == "__main__":
    main()
