#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Pure computational geometry for the 2D chair projection."""

# Standard Library
import dataclasses
import math

# local repo modules
from . import ring_templates
from .chair_config import (
	AXIAL_LENGTH,
	AXIAL_LABEL_OFFSET,
	EQUATORIAL_LENGTH,
	EQUATORIAL_LABEL_SCALE,
	EQUATORIAL_SPLAY,
	RING_CENTROID,
)
from .vocabulary import Position
from .vocabulary import RingKind
from .vocabulary import as_position


#============================================
@dataclasses.dataclass(frozen=True)
class RingAtomView:
	label: str
	x: float
	y: float
	axial_dir: int
	is_ring_heteroatom: bool

	@property
	def point(self) -> tuple[float, float]:
		return (self.x, self.y)


#============================================
@dataclasses.dataclass(frozen=True)
class SubstituentVector:
	bond_start: tuple[float, float]
	bond_end: tuple[float, float]
	label_point: tuple[float, float]

	@property
	def length(self) -> float:
		return math.hypot(
			self.bond_end[0] - self.bond_start[0],
			self.bond_end[1] - self.bond_start[1],
		)


#============================================
def normalize_vector(dx: float, dy: float) -> tuple[float, float]:
	"""Normalize one direction vector."""
	magnitude = math.hypot(dx, dy)
	if magnitude == 0:
		return (0.0, 0.0)
	return (dx / magnitude, dy / magnitude)


#============================================
def ring_coordinates(ring_kind=RingKind.CYCLOHEXANE, flipped: bool = False) -> tuple[RingAtomView, ...]:
	"""Return the six ring atoms as seen in one conformer.

	A ring flip keeps the 2D skeleton and negates every axial direction.
	The shared template is never modified.
	"""
	sign = -1 if flipped else 1
	return tuple(
		RingAtomView(
			label=atom.label,
			x=atom.x,
			y=atom.y,
			axial_dir=atom.axial_dir * sign,
			is_ring_heteroatom=atom.is_ring_heteroatom,
		)
		for atom in ring_templates.ring_template(ring_kind)
	)


#============================================
def _axial_vector(atom: RingAtomView) -> SubstituentVector:
	end_y = atom.y + atom.axial_dir * AXIAL_LENGTH
	return SubstituentVector(
		bond_start=atom.point,
		bond_end=(atom.x, end_y),
		label_point=(atom.x, end_y + atom.axial_dir * AXIAL_LABEL_OFFSET),
	)


#============================================
def _equatorial_vector(atom: RingAtomView) -> SubstituentVector:
	center_x, center_y = RING_CENTROID
	ux, uy = normalize_vector(atom.x - center_x, atom.y - center_y)
	# splay the bond away from the ring plane, opposite the axial slot
	uy += atom.axial_dir * EQUATORIAL_SPLAY
	ux, uy = normalize_vector(ux, uy)
	dx = ux * EQUATORIAL_LENGTH
	dy = uy * EQUATORIAL_LENGTH
	return SubstituentVector(
		bond_start=atom.point,
		bond_end=(atom.x + dx, atom.y + dy),
		label_point=(atom.x + dx * EQUATORIAL_LABEL_SCALE, atom.y + dy * EQUATORIAL_LABEL_SCALE),
	)


#============================================
def substituent_vector(
		ring_kind,
		carbon_index: int,
		position,
		flipped: bool = False) -> SubstituentVector:
	"""Compute bond start, bond end and label anchor for one substituent slot.

	Args:
		ring_kind: RingKind member or its text value.
		carbon_index: ring atom index 0-5; the caller guarantees the range.
		position: 'axial' or 'equatorial' (enum member or text).
		flipped: compute for the ring-flipped conformer.

	Returns:
		SubstituentVector: axial bonds are vertical with length AXIAL_LENGTH,
		equatorial bonds always have length EQUATORIAL_LENGTH.
	"""
	atom = ring_coordinates(ring_kind, flipped)[carbon_index]
	if as_position(position) is Position.AXIAL:
		return _axial_vector(atom)
	return _equatorial_vector(atom)


#============================================
def label_positions(ring_kind, carbon_index: int, flipped: bool = False) -> dict:
	"""Return label anchors for both slots of one ring atom."""
	axial = substituent_vector(ring_kind, carbon_index, Position.AXIAL, flipped)
	equatorial = substituent_vector(ring_kind, carbon_index, Position.EQUATORIAL, flipped)
	return {
		Position.AXIAL.value: axial.label_point,
		Position.EQUATORIAL.value: equatorial.label_point,
	}


#============================================
def axial_direction(ring_kind, carbon_index: int, flipped: bool = False) -> str:
	"""Return 'up' or 'down' for the axial bond of one ring atom."""
	atom = ring_coordinates(ring_kind, flipped)[carbon_index]
	return "up" if atom.axial_dir == -1 else "down"
