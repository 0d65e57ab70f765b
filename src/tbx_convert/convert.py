"""
Convert TBX-Basic into TBX-Min.

One forward walk over the source tree in document order. Boundary
elements (entry, language group, term group) open their TBX-Min
object before the walk descends into them; every element is then
handled once its children are done, the way a closing tag would be.
Nothing here raises for bad data: soft issues become notes, skipped
subtrees or diagnostics.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from lxml import etree

from tbx_convert.categories import (
	STATUS_MAP, ENTRY_TAGS, LANG_GROUP_TAGS, TERM_GROUP_TAGS,
	SUBJECT_FIELD, STATUS, PART_OF_SPEECH, CUSTOMER, DIRECT_CATEGORIES,
	FALLBACK_TAGS, HEADER_TAGS, WRAPPER_TAGS, XML_LANG,
)
from tbx_convert.diagnostics import Diagnostics
from tbx_convert.load import open_source
from tbx_convert.model import (
	TbxMin, ConceptEntry, LangGroup, TermGroup, DiagnosticKind,
)

STRUCTURAL_TAGS = ENTRY_TAGS | LANG_GROUP_TAGS | TERM_GROUP_TAGS


class UsageError(ValueError):
	pass


class NodeKind(Enum):
	header = "header"
	structural = "structural"
	direct = "direct"
	fallback = "fallback"
	wrapper = "wrapper"
	unrecognized = "unrecognized"


@dataclass
class ConversionContext:
	"""Working state for a single convert() call."""
	doc: TbxMin
	tree: etree._ElementTree
	diagnostics: Diagnostics
	languages: tuple[str, str]
	found_languages: set[str] = field(default_factory=set)
	entry: ConceptEntry | None = None
	lang_group: LangGroup | None = None
	term_group: TermGroup | None = None

	def location(self, element: etree._Element) -> str:
		return self.tree.getpath(element)


def local_name(element: etree._Element) -> str:
	return etree.QName(element).localname


def node_text(element: etree._Element) -> str:
	return "".join(element.itertext()).strip()


def category(element: etree._Element) -> str:
	return element.get("type") or local_name(element)


# --- classification ---

def classify(element: etree._Element, ctx: ConversionContext) -> NodeKind:
	tag = local_name(element)
	parent = element.getparent()
	parent_tag = local_name(parent) if parent is not None else ""
	typed = (tag, element.get("type"))

	if tag in STRUCTURAL_TAGS:
		return NodeKind.structural
	if tag in HEADER_TAGS or (tag == "note" and parent_tag == "titleStmt"):
		return NodeKind.header
	if tag in WRAPPER_TAGS or (tag == "p" and parent_tag == "sourceDesc"):
		return NodeKind.wrapper
	if typed == SUBJECT_FIELD and ctx.entry is not None:
		return NodeKind.direct
	if ctx.term_group is None:
		return NodeKind.unrecognized
	if tag in ("term", "note") or typed in DIRECT_CATEGORIES:
		return NodeKind.direct
	if tag in FALLBACK_TAGS:
		return NodeKind.fallback
	return NodeKind.unrecognized


# --- language filter ---

def filter_language(code: str | None, languages: tuple[str, str]) -> bool:
	"""True when a language group with this code belongs in the output."""
	return bool(code) and code.lower() in languages


# --- structural boundaries ---

def open_entry(element: etree._Element, ctx: ConversionContext) -> bool:
	entry = ConceptEntry(id=element.get("id") or None)
	if entry.id is None:
		loc = ctx.location(element)
		ctx.diagnostics.warn(
			DiagnosticKind.missing_entry_id, loc,
			f"found entry missing id attribute: {loc}",
		)
	ctx.entry = entry
	return True


def open_lang_group(element: etree._Element, ctx: ConversionContext) -> bool:
	code = element.get(XML_LANG)
	loc = ctx.location(element)
	if not code:
		ctx.diagnostics.warn(
			DiagnosticKind.missing_language, loc,
			f"skipping langSet without language: {loc}",
		)
		return False
	if not filter_language(code, ctx.languages):
		ctx.diagnostics.warn(
			DiagnosticKind.skipped_language, loc,
			f"skipping langSet for non-requested language '{code}': {loc}",
		)
		return False
	if ctx.entry is None:
		ctx.diagnostics.info(
			DiagnosticKind.not_converted, loc,
			f"element {loc} not converted",
		)
		return False

	lang_group = LangGroup(code=code)
	ctx.found_languages.add(code.lower())
	ctx.entry.lang_groups.append(lang_group)
	ctx.lang_group = lang_group
	return True


def open_term_group(element: etree._Element, ctx: ConversionContext) -> bool:
	if ctx.lang_group is None:
		loc = ctx.location(element)
		ctx.diagnostics.info(
			DiagnosticKind.not_converted, loc,
			f"element {loc} not converted",
		)
		return False
	term_group = TermGroup()
	ctx.lang_group.term_groups.append(term_group)
	ctx.term_group = term_group
	return True


def open_boundary(element: etree._Element, ctx: ConversionContext) -> bool:
	"""Create the TBX-Min object for a boundary. False skips the subtree."""
	tag = local_name(element)
	if tag in ENTRY_TAGS:
		return open_entry(element, ctx)
	if tag in LANG_GROUP_TAGS:
		return open_lang_group(element, ctx)
	return open_term_group(element, ctx)


def close_boundary(element: etree._Element, ctx: ConversionContext) -> None:
	tag = local_name(element)
	if tag in TERM_GROUP_TAGS:
		ctx.term_group = None
	elif tag in LANG_GROUP_TAGS:
		ctx.lang_group = None
	else:
		if ctx.entry.lang_groups:
			ctx.doc.entries.append(ctx.entry)
		else:
			loc = ctx.location(element)
			ctx.diagnostics.info(
				DiagnosticKind.empty_entry, loc,
				f"element {loc} not converted",
			)
		ctx.entry = None


# --- leaf handlers ---

def capture_header(element: etree._Element, ctx: ConversionContext) -> None:
	tag = local_name(element)
	if tag == "title":
		ctx.doc.id = node_text(element)
	elif tag == "note":
		ctx.doc.append_description(node_text(element))
	else:
		for p in element:
			if isinstance(p.tag, str) and local_name(p) == "p":
				ctx.doc.append_description(node_text(p))


def normalize_status(element: etree._Element, ctx: ConversionContext):
	raw = re.sub(r"\s", "", node_text(element))
	status = STATUS_MAP.get(raw)
	if status is None:
		loc = ctx.location(element)
		ctx.diagnostics.info(
			DiagnosticKind.unmapped_status, loc,
			f"unknown administrative status '{raw}' at {loc}",
		)
	return status


def set_attribute(element: etree._Element, ctx: ConversionContext) -> None:
	typed = (local_name(element), element.get("type"))
	text = node_text(element)

	if typed == SUBJECT_FIELD:
		ctx.entry.subject_field = text
		return

	grp = ctx.term_group
	if typed == STATUS:
		grp.status = normalize_status(element, ctx)
	elif typed == PART_OF_SPEECH:
		grp.part_of_speech = text
	elif typed == CUSTOMER:
		grp.customer = text
	elif typed[0] == "term":
		grp.term = text
	else:
		grp.note = text


def paste_as_note(
	term_group: TermGroup, category: str, text: str,
	diagnostics: Diagnostics, location: str,
) -> None:
	"""Keep a category TBX-Min cannot express as a labeled note line."""
	term_group.append_note(f"{category}:{text}")
	diagnostics.info(
		DiagnosticKind.pasted_in_note, location,
		f"element {location} pasted in note",
	)


# --- walk ---

def complete(element: etree._Element, kind: NodeKind, ctx: ConversionContext) -> None:
	match kind:
		case NodeKind.header:
			capture_header(element, ctx)
		case NodeKind.structural:
			close_boundary(element, ctx)
		case NodeKind.direct:
			set_attribute(element, ctx)
		case NodeKind.fallback:
			paste_as_note(
				ctx.term_group, category(element), node_text(element),
				ctx.diagnostics, ctx.location(element),
			)
		case NodeKind.wrapper:
			pass
		case NodeKind.unrecognized:
			loc = ctx.location(element)
			ctx.diagnostics.info(
				DiagnosticKind.not_converted, loc,
				f"element {loc} not converted",
			)
		case _:
			raise ValueError(f"unhandled node kind {kind}")


def visit(element: etree._Element, ctx: ConversionContext) -> None:
	kind = classify(element, ctx)
	if kind is NodeKind.structural and not open_boundary(element, ctx):
		return
	for child in element:
		if isinstance(child.tag, str):
			visit(child, ctx)
	complete(element, kind, ctx)


def check_languages(ctx: ConversionContext) -> None:
	if len(ctx.found_languages) == 2:
		return
	missing = set(ctx.languages) - ctx.found_languages
	if missing:
		ctx.diagnostics.warn(
			DiagnosticKind.missing_languages, "/",
			"could not find langSets for language(s): " + ", ".join(sorted(missing)),
		)


def convert(
	data: str | bytes | Path,
	source_lang: str,
	target_lang: str,
	diagnostics: Diagnostics | None = None,
) -> TbxMin:
	"""
	Build a TBX-Min document from TBX-Basic input.

	`data` is a path or the document text. Only language groups for
	`source_lang` and `target_lang` (compared case-insensitively) are
	kept. Pass a Diagnostics object to inspect what was dropped or
	pasted into notes; the same messages always go to the log.
	"""
	if not data or not source_lang or not target_lang:
		raise UsageError("Usage: convert(data, source_lang, target_lang)")
	if diagnostics is None:
		diagnostics = Diagnostics()

	tree = open_source(data)
	doc = TbxMin(source_lang=source_lang, target_lang=target_lang)
	ctx = ConversionContext(
		doc=doc,
		tree=tree,
		diagnostics=diagnostics,
		languages=(source_lang.lower(), target_lang.lower()),
	)
	visit(tree.getroot(), ctx)
	check_languages(ctx)
	return doc
