from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class Status(Enum):
	preferred = "preferred"
	admitted = "admitted"
	not_recommended = "notRecommended"
	obsolete = "obsolete"


class Level(Enum):
	info = "info"
	warning = "warning"


class DiagnosticKind(Enum):
	not_converted = "not_converted"
	pasted_in_note = "pasted_in_note"
	missing_entry_id = "missing_entry_id"
	missing_language = "missing_language"
	skipped_language = "skipped_language"
	unmapped_status = "unmapped_status"
	empty_entry = "empty_entry"
	missing_languages = "missing_languages"


# --- TBX-Min term group ---

@dataclass
class TermGroup:
	term: str = ""
	status: Status | None = None
	part_of_speech: str | None = None
	customer: str | None = None
	note: str | None = None

	def append_note(self, line: str) -> None:
		self.note = (self.note or "") + "\n" + line


# --- TBX-Min language group ---

@dataclass
class LangGroup:
	code: str
	term_groups: list[TermGroup] = field(default_factory=list)


# --- TBX-Min entry ---

@dataclass
class ConceptEntry:
	id: str | None = None
	subject_field: str | None = None
	lang_groups: list[LangGroup] = field(default_factory=list)


# --- TBX-Min document ---

@dataclass
class TbxMin:
	source_lang: str
	target_lang: str
	id: str | None = None
	description: str | None = None
	entries: list[ConceptEntry] = field(default_factory=list)

	def append_description(self, text: str) -> None:
		self.description = (self.description or "") + text + "\n"


# --- Diagnostics ---

@dataclass
class Diagnostic:
	kind: DiagnosticKind
	level: Level
	location: str
	message: str
