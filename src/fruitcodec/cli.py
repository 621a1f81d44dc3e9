"""
Command-line interface and entry points for fruitcodec.

Usage:
    fruitcodec check  /path/to/document.json
    fruitcodec format /path/to/document.json [--write]
    fruitcodec show   /path/to/document.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from fruitcodec.codec import decode_file, encode, encode_file
from fruitcodec.core.exceptions import DecodeError
from fruitcodec.core.logger import configure_root_logger, get_logger, push_document, reset_document
from fruitcodec.models.codec_config import EncoderConfig

logger = get_logger(__name__)


def main(document_path: str, *, config: Optional[EncoderConfig] = None) -> Dict[str, Any]:
    """
    Decode a document, re-encode it and summarize the result.

    Args:
        document_path: Path to a JSON document
        config: Formatting options used for the re-encoded text

    Returns:
        Summary with status, fruit, owner, has_description and canonical
        (True when the file already matches the canonical encoding)

    Raises:
        FileNotFoundError: If the document doesn't exist
        DecodeError: If the document cannot be decoded

    Example:
        >>> from fruitcodec.cli import main
        >>> result = main("basket/john.json")
        >>> print(f"Fruit: {result['fruit']}")
    """
    record = decode_file(document_path)
    original = Path(document_path).read_text(encoding="utf-8")
    canonical = encode(record, config)

    return {
        "status": "success",
        "fruit": record.category.label,
        "owner": record.owner,
        "has_description": record.description is not None,
        "canonical": original == canonical,
    }


def check_document(document_path: str) -> bool:
    """
    Validate a document without doing anything else with it.

    Returns:
        True if the document decodes

    Raises:
        FileNotFoundError: If the document doesn't exist
        DecodeError: If the document is invalid
    """
    token = push_document(document_path)
    try:
        decode_file(document_path)
        logger.info("Document is valid")
        return True
    except DecodeError as e:
        logger.error(f"Document validation failed: {e}")
        raise
    finally:
        reset_document(token)


def _encoder_config(args: argparse.Namespace) -> EncoderConfig:
    return EncoderConfig(
        indent=args.indent,
        ensure_ascii=args.ascii,
        trailing_newline=args.trailing_newline,
    )


def cli() -> None:
    """
    Command-line interface for fruitcodec.

    Supports subcommands:
    - check: Validate a document
    - format: Print (or rewrite) the canonical encoding of a document
    - show: Print a JSON summary of a document
    """
    parser = argparse.ArgumentParser(
        prog="fruitcodec",
        description="Decode, validate and re-encode fruit ownership documents"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a document"
    )
    check_parser.add_argument("document", help="Path to a JSON document")

    format_parser = subparsers.add_parser(
        "format",
        help="Print the canonical encoding of a document"
    )
    format_parser.add_argument("document", help="Path to a JSON document")
    format_parser.add_argument(
        "--write", "-w",
        action="store_true",
        help="Rewrite the document in place instead of printing it"
    )
    format_parser.add_argument("--indent", type=int, default=2, help="Indent width (default: 2)")
    format_parser.add_argument("--ascii", action="store_true", help="Escape non-ASCII characters")
    format_parser.add_argument(
        "--trailing-newline",
        action="store_true",
        help="End the output with a newline"
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print a JSON summary of a document"
    )
    show_parser.add_argument("document", help="Path to a JSON document")

    args = parser.parse_args()
    configure_root_logger("DEBUG" if args.verbose else "INFO")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "check":
            check_document(args.document)

        elif args.command == "format":
            config = _encoder_config(args)
            record = decode_file(args.document)
            if args.write:
                encode_file(record, args.document, config)
                logger.info(f"Reformatted {args.document}")
            else:
                print(encode(record, config), end="" if config.trailing_newline else "\n")

        elif args.command == "show":
            print(json.dumps(main(args.document), indent=2))

    except (DecodeError, FileNotFoundError, ValidationError) as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    cli()
