"""
Emit TBX-Min XML from a converted document.
"""

from xml.sax.saxutils import escape, quoteattr
from tbx_convert.model import TbxMin, ConceptEntry, LangGroup, TermGroup

HEADER_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<TBX dialect="TBX-Min">
"""

FOOTER = """</TBX>
"""


def _element(pad: str, tag: str, text: str | None) -> list[str]:
	if text is None:
		return []
	return [f"{pad}<{tag}>{escape(text)}</{tag}>"]


def emit_header(doc: TbxMin, indent_level: int = 1) -> str:
	pad = "  " * indent_level
	lines = [f"{pad}<header>"]
	lines += _element(pad + "  ", "id", doc.id)
	lines += _element(pad + "  ", "description", doc.description)
	source = quoteattr(doc.source_lang)
	target = quoteattr(doc.target_lang)
	lines.append(f"{pad}  <languages source={source} target={target}/>")
	lines.append(f"{pad}</header>")
	return "\n".join(lines)


def emit_term_group(term_group: TermGroup, indent_level: int = 0) -> str:
	pad = "  " * indent_level
	inner = pad + "  "
	status = term_group.status.value if term_group.status else None

	lines = [f"{pad}<termGroup>"]
	lines += _element(inner, "term", term_group.term)
	lines += _element(inner, "termStatus", status)
	lines += _element(inner, "partOfSpeech", term_group.part_of_speech)
	lines += _element(inner, "customer", term_group.customer)
	lines += _element(inner, "note", term_group.note)
	lines.append(f"{pad}</termGroup>")
	return "\n".join(lines)


def emit_lang_group(lang_group: LangGroup, indent_level: int = 0) -> str:
	pad = "  " * indent_level
	lines = [f"{pad}<langGroup xml:lang={quoteattr(lang_group.code)}>"]
	for term_group in lang_group.term_groups:
		lines.append(emit_term_group(term_group, indent_level + 1))
	lines.append(f"{pad}</langGroup>")
	return "\n".join(lines)


def emit_entry(entry: ConceptEntry, indent_level: int = 0) -> str:
	pad = "  " * indent_level
	attrs = f" id={quoteattr(entry.id)}" if entry.id else ""

	lines = [f"{pad}<entry{attrs}>"]
	lines += _element(pad + "  ", "subjectField", entry.subject_field)
	for lang_group in entry.lang_groups:
		lines.append(emit_lang_group(lang_group, indent_level + 1))
	lines.append(f"{pad}</entry>")
	return "\n".join(lines)


def emit_tbxmin(doc: TbxMin) -> str:
	parts = [HEADER_TEMPLATE, emit_header(doc), "\n  <body>\n"]
	for entry in doc.entries:
		parts.append(emit_entry(entry, indent_level=2))
		parts.append("\n")
	parts.append("  </body>\n")
	parts.append(FOOTER)
	return "".join(parts)


def write_tbxmin(doc: TbxMin, output_path: str) -> None:
	with open(output_path, "w", encoding="utf-8") as f:
		f.write(emit_tbxmin(doc))
	print(f"  Wrote {len(doc.entries)} entries to {output_path}")
