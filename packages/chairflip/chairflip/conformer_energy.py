#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Conformer strain energies and Boltzmann populations from A-values.

Only axial substituents are charged their A-value (1,3-diaxial
interactions); equatorial substituents contribute nothing. Groups missing
from the strain table are treated as sterically inert.
"""

# Standard Library
import dataclasses
import math

# local repo modules
from .chair_config import DESCRIPTION_EPSILON
from .chair_config import EQUAL_ENERGY_EPSILON
from .chair_config import RT_KCAL_PER_MOL
from .molecule_state import MoleculeState
from .molecule_state import Substituent
from .strain_database import strain_constants
from .vocabulary import Conformer
from .vocabulary import Position


#============================================
@dataclasses.dataclass(frozen=True)
class ConformerComparison:
	energy_current: float
	energy_flipped: float
	delta_e: float
	preferred: Conformer
	percent_preferred: int


#============================================
def strain_constant(group: str) -> float:
	"""Return the A-value of one group, 0.0 for groups not in the table."""
	return strain_constants.get(group, 0.0)


#============================================
def list_known_substituents() -> tuple[tuple[str, float], ...]:
	"""Return (group, A-value) pairs in table order."""
	return tuple(strain_constants.items())


#============================================
def resolved_position(sub: Substituent, flipped: bool) -> Position:
	"""Return where a substituent sits in the conformer with this flip flag."""
	if flipped:
		return sub.position.opposite()
	return sub.position


#============================================
def strain_energy(state: MoleculeState, conformer_flipped: bool) -> float:
	"""Sum the A-values of substituents that are axial in one conformer."""
	total = 0.0
	for sub in state.substituents:
		if resolved_position(sub, conformer_flipped) is Position.AXIAL:
			total += strain_constant(sub.group)
	return total


#============================================
def _round_half_up(value: float) -> int:
	return int(math.floor(value + 0.5))


#============================================
def boltzmann_percent(delta_e: float) -> int:
	"""Return the equilibrium percentage of the lower-energy conformer at 298 K."""
	if delta_e < EQUAL_ENERGY_EPSILON:
		return 50
	# K / (K + 1) rewritten as 1 / (1 + exp(-x)) so large gaps cannot overflow
	fraction = 1.0 / (1.0 + math.exp(-delta_e / RT_KCAL_PER_MOL))
	return _round_half_up(100.0 * fraction)


#============================================
def compare_conformers(state: MoleculeState) -> ConformerComparison:
	"""Compare the current chair of a state against its ring-flipped chair.

	Ties prefer the current conformer.
	"""
	energy_current = strain_energy(state, state.flipped)
	energy_flipped = strain_energy(state, not state.flipped)
	delta_e = abs(energy_current - energy_flipped)
	if energy_current <= energy_flipped:
		preferred = Conformer.CURRENT
	else:
		preferred = Conformer.FLIPPED
	return ConformerComparison(
		energy_current=energy_current,
		energy_flipped=energy_flipped,
		delta_e=delta_e,
		preferred=preferred,
		percent_preferred=boltzmann_percent(delta_e),
	)


#============================================
def preferred_description(comparison: ConformerComparison) -> str:
	if comparison.delta_e < DESCRIPTION_EPSILON:
		return "Neither (equal energy)"
	chair_name = comparison.preferred.value.capitalize()
	return f"{chair_name} ({comparison.percent_preferred}%)"


#============================================
def format_energy(energy: float) -> str:
	return f"{energy:.2f} kcal/mol"
