"""
Open TBX-Basic input from a file path or an in-memory buffer.

Errors from the filesystem and from the XML parser are not caught
here; the caller decides what a missing or malformed file means.
"""

from pathlib import Path
from lxml import etree

TEXT_LEAD = "\ufeff \t\r\n"


def make_parser(encoding: str | None = None) -> etree.XMLParser:
	return etree.XMLParser(
		encoding=encoding,
		remove_blank_text=True,
		remove_comments=True,
		resolve_entities=False,
		no_network=True,
	)


def is_buffer(data) -> bool:
	if isinstance(data, (bytes, bytearray)):
		return True
	return isinstance(data, str) and data.lstrip(TEXT_LEAD).startswith("<")


def open_source(data: str | bytes | Path) -> etree._ElementTree:
	"""
	Parse the input into an element tree. `data` is either a path to
	a TBX file or the document itself (bytes, or a str starting with '<').
	"""
	if isinstance(data, str) and is_buffer(data):
		# already decoded, so any encoding declaration is ignored
		text = data.lstrip(TEXT_LEAD)
		root = etree.fromstring(text.encode("utf-8"), make_parser("utf-8"))
		return root.getroottree()
	parser = make_parser()
	if is_buffer(data):
		root = etree.fromstring(bytes(data), parser)
		return root.getroottree()
	path = Path(data)
	with open(path, "rb") as f:
		return etree.parse(f, parser)
