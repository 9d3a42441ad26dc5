#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Closed vocabularies used across the chair model."""

# Standard Library
import enum


#============================================
class RingKind(str, enum.Enum):
	CYCLOHEXANE = "cyclohexane"
	PYRANOSE = "pyranose"


#============================================
class Position(str, enum.Enum):
	AXIAL = "axial"
	EQUATORIAL = "equatorial"

	def opposite(self) -> "Position":
		"""Return the other slot on the same ring atom."""
		if self is Position.AXIAL:
			return Position.EQUATORIAL
		return Position.AXIAL

	@property
	def short_label(self) -> str:
		return "ax" if self is Position.AXIAL else "eq"


#============================================
class Anomer(str, enum.Enum):
	ALPHA = "alpha"
	BETA = "beta"

	def opposite(self) -> "Anomer":
		if self is Anomer.ALPHA:
			return Anomer.BETA
		return Anomer.ALPHA


#============================================
class Conformer(str, enum.Enum):
	CURRENT = "current"
	FLIPPED = "flipped"


_POSITION_ALIASES = {
	"ax": Position.AXIAL,
	"eq": Position.EQUATORIAL,
}


#============================================
def _coerce(enum_class, value, name: str, aliases: dict | None = None):
	if isinstance(value, enum_class):
		return value
	text = str(value).strip().lower()
	if aliases and text in aliases:
		return aliases[text]
	try:
		return enum_class(text)
	except ValueError as error:
		allowed = " or ".join(member.value for member in enum_class)
		raise ValueError(f"Unsupported {name} {value!r}; expected {allowed}") from error


#============================================
def as_ring_kind(value) -> RingKind:
	"""Normalize a ring kind given as enum member or text."""
	return _coerce(RingKind, value, "ring_kind")


#============================================
def as_position(value) -> Position:
	"""Normalize a substituent position; accepts 'ax' and 'eq' as well."""
	return _coerce(Position, value, "position", _POSITION_ALIASES)


#============================================
def as_anomer(value) -> Anomer:
	"""Normalize an anomer given as enum member or text."""
	return _coerce(Anomer, value, "anomer")
