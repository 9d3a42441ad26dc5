#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Immutable molecule state and its transitions.

Substituent positions are always stored relative to the unflipped chair.
Hydrogen is implicit: a slot without a stored substituent carries H.
"""

# Standard Library
import dataclasses

# local repo modules
from .vocabulary import Anomer
from .vocabulary import Position
from .vocabulary import RingKind
from .vocabulary import as_anomer
from .vocabulary import as_position
from .vocabulary import as_ring_kind


IMPLICIT_GROUP = "H"


#============================================
@dataclasses.dataclass(frozen=True)
class Substituent:
	carbon_index: int
	position: Position
	group: str

	def __post_init__(self):
		object.__setattr__(self, "position", as_position(self.position))

	def key(self) -> tuple[int, Position]:
		return (self.carbon_index, self.position)


#============================================
@dataclasses.dataclass(frozen=True)
class MoleculeState:
	ring_kind: RingKind = RingKind.CYCLOHEXANE
	flipped: bool = False
	substituents: tuple[Substituent, ...] = ()
	sugar_type: str | None = None
	anomer: Anomer | None = None

	def __post_init__(self):
		object.__setattr__(self, "ring_kind", as_ring_kind(self.ring_kind))
		object.__setattr__(self, "substituents", tuple(self.substituents))
		if self.anomer is not None:
			object.__setattr__(self, "anomer", as_anomer(self.anomer))


#============================================
def create_molecule_state() -> MoleculeState:
	"""Return an unflipped cyclohexane with no substituents."""
	return MoleculeState()


#============================================
def reset_molecule() -> MoleculeState:
	return create_molecule_state()


#============================================
def _without(substituents, carbon_index: int, position: Position) -> tuple[Substituent, ...]:
	return tuple(
		sub for sub in substituents
		if not (sub.carbon_index == carbon_index and sub.position is position)
	)


#============================================
def set_substituent(state: MoleculeState, carbon_index: int, position, group: str) -> MoleculeState:
	"""Upsert one substituent; storing 'H' clears the slot instead."""
	position = as_position(position)
	substituents = _without(state.substituents, carbon_index, position)
	if group != IMPLICIT_GROUP:
		substituents += (Substituent(carbon_index, position, group),)
	return dataclasses.replace(state, substituents=substituents)


#============================================
def remove_substituent(state: MoleculeState, carbon_index: int, position) -> MoleculeState:
	"""Drop the substituent in one slot; an empty slot is left as is."""
	position = as_position(position)
	return dataclasses.replace(
		state,
		substituents=_without(state.substituents, carbon_index, position),
	)


#============================================
def get_substituent(state: MoleculeState, carbon_index: int, position) -> str | None:
	"""Return the group in one slot, or None when the slot holds implicit H."""
	position = as_position(position)
	for sub in state.substituents:
		if sub.carbon_index == carbon_index and sub.position is position:
			return sub.group
	return None


#============================================
def flip_chair(state: MoleculeState) -> MoleculeState:
	return dataclasses.replace(state, flipped=not state.flipped)


#============================================
def sorted_substituents(state: MoleculeState) -> tuple[Substituent, ...]:
	"""Return substituents ordered by ring index, insertion order kept on ties."""
	return tuple(sorted(state.substituents, key=lambda sub: sub.carbon_index))


#============================================
def substituent_summary(sub: Substituent) -> str:
	"""Format one substituent as a list line, e.g. 'C1: CH3 (ax)'."""
	return f"C{sub.carbon_index + 1}: {sub.group} ({sub.position.short_label})"


#============================================
def export_basename(state: MoleculeState) -> str:
	"""Return a file base name describing the molecule."""
	if state.ring_kind is RingKind.PYRANOSE and state.sugar_type:
		anomer = state.anomer.value if state.anomer else Anomer.BETA.value
		return f"{anomer}-{state.sugar_type}"
	if state.substituents:
		return "substituted-cyclohexane"
	return "cyclohexane"
