"""Typed values carried by structured results."""

from dataclasses import dataclass
from enum import Enum

from .types import MAX_UINT64


class FieldType(Enum):
	INT = "int"
	STRING = "string"


@dataclass(frozen=True, init=False)
class Field:
	"""One result value: either an unsigned 64-bit integer or text.

	The constructor picks the variant from the value it is given. Readers
	should check ``type`` (or use ``as_int``/``as_str``, which check it for
	them) before using the payload.
	"""

	type: FieldType
	value: int | str

	def __init__(self, value: int | str):
		if isinstance(value, bool):
			raise TypeError("Field does not accept bool values")
		if isinstance(value, int):
			if not 0 <= value <= MAX_UINT64:
				raise ValueError(f"Field integer out of unsigned 64-bit range: {value}")
			field_type = FieldType.INT
		elif isinstance(value, str):
			field_type = FieldType.STRING
		else:
			raise TypeError(f"Field value must be int or str, not {type(value).__name__}")
		object.__setattr__(self, "type", field_type)
		object.__setattr__(self, "value", value)

	@classmethod
	def of_int(cls, value: int) -> "Field":
		if isinstance(value, bool) or not isinstance(value, int):
			raise TypeError(f"Expected int, got {type(value).__name__}")
		return cls(value)

	@classmethod
	def of_str(cls, value: str) -> "Field":
		if not isinstance(value, str):
			raise TypeError(f"Expected str, got {type(value).__name__}")
		return cls(value)

	@property
	def is_int(self) -> bool:
		return self.type is FieldType.INT

	@property
	def is_str(self) -> bool:
		return self.type is FieldType.STRING

	def as_int(self) -> int:
		if self.type is not FieldType.INT:
			raise TypeError("Field holds a string, not an int")
		return self.value

	def as_str(self) -> str:
		if self.type is not FieldType.STRING:
			raise TypeError("Field holds an int, not a string")
		return self.value


def make_fields(*values: int | str | Field) -> list[Field]:
	"""Build an ordered field list, wrapping plain values as needed."""
	return [value if isinstance(value, Field) else Field(value) for value in values]
