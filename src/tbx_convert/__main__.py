"""
Command line driver.

Usage: python -m tbx_convert <file> <source-lang> <target-lang>
"""

import argparse
import logging
import sys

from lxml import etree
from rich.console import Console
from rich.table import Table

from tbx_convert.convert import convert, UsageError
from tbx_convert.diagnostics import Diagnostics
from tbx_convert.emit_tbxmin import emit_tbxmin, write_tbxmin


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="tbx-convert",
		description="Convert a TBX-Basic file into TBX-Min.",
	)
	parser.add_argument("file", help="TBX-Basic input file")
	parser.add_argument("source", help="source language code, e.g. EN")
	parser.add_argument("target", help="target language code, e.g. DE")
	parser.add_argument("-o", "--output", help="write TBX-Min here instead of stdout")
	parser.add_argument(
		"--log-level", default="WARNING",
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		help="diagnostics printed to stderr (default: WARNING)",
	)
	parser.add_argument(
		"--summary", action="store_true",
		help="print diagnostic counts by kind to stderr",
	)
	return parser


def print_summary(diagnostics: Diagnostics, console: Console) -> None:
	table = Table(title=f"{len(diagnostics)} diagnostics")
	table.add_column("kind")
	table.add_column("count", justify="right")
	for kind, count in diagnostics.by_kind().items():
		table.add_row(kind, str(count))
	console.print(table)


def run(argv: list[str] | None = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	logging.basicConfig(
		level=args.log_level,
		format="%(levelname)s: %(message)s",
		stream=sys.stderr,
	)
	diagnostics = Diagnostics()
	try:
		doc = convert(args.file, args.source, args.target, diagnostics)
	except UsageError as e:
		parser.error(str(e))
	except (OSError, etree.XMLSyntaxError) as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1

	if args.output:
		write_tbxmin(doc, args.output)
	else:
		sys.stdout.write(emit_tbxmin(doc))

	if args.summary:
		print_summary(diagnostics, Console(stderr=True))
	return 0


def main() -> None:
	sys.exit(run())


if __name__ == "__main__":
	main()
