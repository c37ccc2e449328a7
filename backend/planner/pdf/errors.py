from __future__ import annotations


class DocumentError(Exception):
	"""A PDF pipeline stage (layout, build, serialize) failed."""

	def __init__(self, stage: str, message: str) -> None:
		super().__init__(f"{stage}: {message}")
		self.stage = stage
		self.message = message


class InvariantViolation(DocumentError):
	"""Internal inconsistency in the generated document; indicates a bug, never repaired."""
