#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Static ring-atom layouts for the chair projection.

Both ring kinds share the same 2D skeleton. Atoms 0, 2 and 4 sit on the
upper edge of the drawn chair and carry an axial bond pointing up
(axial_dir -1 in screen coordinates); atoms 1, 3 and 5 point down. In the
pyranose ring index 0 is the anomeric carbon and index 5 is the ring oxygen.
"""

# Standard Library
import dataclasses

# local repo modules
from .chair_config import RING_SIZE
from .vocabulary import RingKind
from .vocabulary import as_ring_kind


#============================================
@dataclasses.dataclass(frozen=True)
class RingAtom:
	label: str
	x: float
	y: float
	axial_dir: int
	is_ring_heteroatom: bool = False


CYCLOHEXANE_TEMPLATE = (
	RingAtom("C1", 120.0, 60.0, -1),
	RingAtom("C2", 200.0, 100.0, 1),
	RingAtom("C3", 240.0, 180.0, -1),
	RingAtom("C4", 200.0, 260.0, 1),
	RingAtom("C5", 120.0, 220.0, -1),
	RingAtom("C6", 80.0, 140.0, 1),
)

PYRANOSE_TEMPLATE = (
	RingAtom("C1", 120.0, 60.0, -1),
	RingAtom("C2", 200.0, 100.0, 1),
	RingAtom("C3", 240.0, 180.0, -1),
	RingAtom("C4", 200.0, 260.0, 1),
	RingAtom("C5", 120.0, 220.0, -1),
	RingAtom("O", 80.0, 140.0, 1, is_ring_heteroatom=True),
)

RING_TEMPLATES = {
	RingKind.CYCLOHEXANE: CYCLOHEXANE_TEMPLATE,
	RingKind.PYRANOSE: PYRANOSE_TEMPLATE,
}


#============================================
def ring_template(ring_kind) -> tuple[RingAtom, ...]:
	"""Return the shared template for one ring kind."""
	return RING_TEMPLATES[as_ring_kind(ring_kind)]


#============================================
def ring_bonds(ring_kind=RingKind.CYCLOHEXANE) -> tuple[tuple[int, int], ...]:
	"""Return ring bonds as (from, to) atom index pairs, closing the ring."""
	size = len(ring_template(ring_kind))
	return tuple((index, (index + 1) % size) for index in range(size))


#============================================
def template_alternates(template: tuple[RingAtom, ...]) -> bool:
	"""Return True when no two ring-adjacent atoms share an axial direction."""
	if len(template) != RING_SIZE:
		return False
	for index, atom in enumerate(template):
		neighbor = template[(index + 1) % len(template)]
		if atom.axial_dir not in (1, -1):
			return False
		if atom.axial_dir == neighbor.axial_dir:
			return False
	return True
