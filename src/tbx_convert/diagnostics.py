"""
Diagnostics channel for the converter.

Every soft data issue met during conversion becomes one Diagnostic
record. Records are kept in emission order and forwarded to the
module logger, so callers can either inspect them afterwards or just
configure logging.
"""

import logging
from collections import Counter

from tbx_convert.model import Diagnostic, DiagnosticKind, Level

logger = logging.getLogger(__name__)

log_levels = {
	Level.info: logging.INFO,
	Level.warning: logging.WARNING,
}


class Diagnostics:
	def __init__(self) -> None:
		self.records: list[Diagnostic] = []

	def emit(self, kind: DiagnosticKind, level: Level, location: str, message: str) -> Diagnostic:
		record = Diagnostic(kind=kind, level=level, location=location, message=message)
		self.records.append(record)
		logger.log(log_levels[level], "%s", message)
		return record

	def info(self, kind: DiagnosticKind, location: str, message: str) -> Diagnostic:
		return self.emit(kind, Level.info, location, message)

	def warn(self, kind: DiagnosticKind, location: str, message: str) -> Diagnostic:
		return self.emit(kind, Level.warning, location, message)

	def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
		return [r for r in self.records if r.kind == kind]

	def by_kind(self) -> dict[str, int]:
		counts = Counter(r.kind.value for r in self.records)
		return dict(sorted(counts.items(), key=lambda x: -x[1]))

	def __len__(self) -> int:
		return len(self.records)

	def __iter__(self):
		return iter(self.records)
