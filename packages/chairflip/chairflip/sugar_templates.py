#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Pyranose sugar templates and their expansion into molecule states.

Template substituents are given for the 4C1 chair of the D-sugar and cover
ring indices 1-4 (C2-C5). The anomeric hydroxyl on C1 (index 0) is added
when a template is instantiated.
"""

# Standard Library
import dataclasses
import json
import types

# local repo modules
from .chair_config import SUGAR_DATA_PATH
from .molecule_state import MoleculeState
from .molecule_state import Substituent
from .vocabulary import Anomer
from .vocabulary import Position
from .vocabulary import RingKind
from .vocabulary import as_anomer
from .vocabulary import as_position

ANOMERIC_INDEX = 0
ANOMERIC_GROUP = "OH"


#============================================
class UnknownTemplateError(ValueError):
	"""Raised when a sugar key is not in the template table."""

	def __init__(self, sugar_key):
		self.sugar_key = sugar_key
		known = ", ".join(SUGAR_TEMPLATES)
		super().__init__(f"Unknown sugar type {sugar_key!r}; expected one of: {known}")


#============================================
@dataclasses.dataclass(frozen=True)
class TemplateSubstituent:
	carbon: int
	position: Position
	group: str


#============================================
@dataclasses.dataclass(frozen=True)
class SugarTemplate:
	display_name: str
	substituents: tuple[TemplateSubstituent, ...]
	equatorial_favoring_anomer: Anomer


#============================================
@dataclasses.dataclass(frozen=True)
class SugarSummary:
	key: str
	display_name: str


#============================================
def _load_sugar_templates():
	"""Load sugar templates from JSON into a read-only mapping keyed by sugar name."""
	with open(SUGAR_DATA_PATH, "r") as handle:
		raw_data = json.load(handle)
	templates = {}
	for key, entry in raw_data.items():
		substituents = tuple(
			TemplateSubstituent(int(carbon), as_position(position), str(group))
			for carbon, position, group in entry["substituents"]
		)
		templates[key] = SugarTemplate(
			display_name=entry["name"],
			substituents=substituents,
			equatorial_favoring_anomer=as_anomer(entry["equatorial_anomer"]),
		)
	return types.MappingProxyType(templates)


SUGAR_TEMPLATES = _load_sugar_templates()


#============================================
def get_template(sugar_key: str) -> SugarTemplate:
	try:
		return SUGAR_TEMPLATES[sugar_key]
	except KeyError as error:
		raise UnknownTemplateError(sugar_key) from error


#============================================
def list_sugars() -> tuple[SugarSummary, ...]:
	"""Return (key, display name) summaries in table order."""
	return tuple(
		SugarSummary(key=key, display_name=template.display_name)
		for key, template in SUGAR_TEMPLATES.items()
	)


#============================================
def instantiate_sugar(sugar_key: str = "glucose", anomer=Anomer.BETA) -> MoleculeState:
	"""Build an unflipped pyranose state from one sugar template.

	The anomeric OH is equatorial when the requested anomer is the one the
	template marks as equatorial in the 4C1 chair, otherwise axial.

	Raises:
		UnknownTemplateError: sugar_key is not a known template.
	"""
	template = get_template(sugar_key)
	anomer = as_anomer(anomer)
	substituents = [
		Substituent(sub.carbon, sub.position, sub.group)
		for sub in template.substituents
	]
	if anomer is template.equatorial_favoring_anomer:
		anomeric_position = Position.EQUATORIAL
	else:
		anomeric_position = Position.AXIAL
	substituents.append(Substituent(ANOMERIC_INDEX, anomeric_position, ANOMERIC_GROUP))
	return MoleculeState(
		ring_kind=RingKind.PYRANOSE,
		flipped=False,
		substituents=tuple(substituents),
		sugar_type=sugar_key,
		anomer=anomer,
	)


#============================================
def toggle_anomer(state: MoleculeState) -> MoleculeState:
	"""Re-derive the state with the other anomer; the flip state is discarded."""
	current = state.anomer if state.anomer is not None else Anomer.BETA
	return instantiate_sugar(state.sugar_type, current.opposite())


#============================================
def change_sugar_type(state: MoleculeState, sugar_key: str) -> MoleculeState:
	"""Re-derive the state from another template, keeping the anomer."""
	anomer = state.anomer if state.anomer is not None else Anomer.BETA
	return instantiate_sugar(sugar_key, anomer)
