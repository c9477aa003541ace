import argparse
import json
import sys
from pathlib import Path
from typing import Optional

import yaml

from ingest_attachment.attachment.processor import AttachmentProcessor, AttachmentProcessorFactory
from ingest_attachment.config import Settings, load_definition
from ingest_attachment.config_utils import check_no_unknown_properties
from ingest_attachment.exceptions import IngestAttachmentError
from ingest_attachment.logging import configure_logging, get_logger
from ingest_attachment.model.document import IngestDocument


def simulate(args: argparse.Namespace) -> int:
    """Build an attachment processor from a definition file and run it on one file."""
    settings = Settings.from_file(args.settings) if args.settings else Settings()
    level = args.log_level or settings.log_level.value
    configure_logging(level=level, log_file=settings.log_file, error_log_dir=settings.error_log_dir)
    logger = get_logger("cli")

    try:
        definition = load_definition(args.processor)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Cannot load processor definition {args.processor}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    factory = AttachmentProcessorFactory()
    try:
        processor = factory.create(definition, tag=args.tag)
        if settings.strict:
            check_no_unknown_properties(AttachmentProcessor.TYPE, processor.tag, definition)

        document = IngestDocument()
        document.set_field_value(processor.source_field, Path(args.file).read_bytes())
        processor(document)
    except (IngestAttachmentError, OSError) as e:
        logger.error(f"Simulation failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = document.get_field_value(processor.target_field)
    print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ingest-attachment")
    subparsers = parser.add_subparsers(dest="command")

    sim = subparsers.add_parser("simulate", help="Run an attachment processor definition on a local file")
    sim.add_argument("--processor", required=True, help="Processor definition (YAML or JSON)")
    sim.add_argument("--file", required=True, help="File whose bytes are placed at the source field")
    sim.add_argument("--tag", default=None, help="Processor tag (overrides the definition's tag)")
    sim.add_argument("--settings", default=None, help="Settings file (YAML or JSON)")
    sim.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """entry point for the command line"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "simulate":
        return simulate(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
