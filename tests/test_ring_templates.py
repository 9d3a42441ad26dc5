"""Unit tests for the static chair ring templates."""

# Local repo modules
import conftest


conftest.add_chairflip_to_sys_path()

from chairflip import ring_templates


#============================================
def test_both_templates_alternate_axial_direction():
	assert ring_templates.template_alternates(ring_templates.CYCLOHEXANE_TEMPLATE)
	assert ring_templates.template_alternates(ring_templates.PYRANOSE_TEMPLATE)


#============================================
def test_non_alternating_template_detected():
	broken = list(ring_templates.CYCLOHEXANE_TEMPLATE)
	broken[1] = ring_templates.RingAtom("C2", 200.0, 100.0, -1)
	assert not ring_templates.template_alternates(tuple(broken))
	assert not ring_templates.template_alternates(ring_templates.CYCLOHEXANE_TEMPLATE[:5])


#============================================
def test_only_pyranose_oxygen_is_heteroatom():
	pyranose = ring_templates.ring_template("pyranose")
	flags = [atom.is_ring_heteroatom for atom in pyranose]
	assert flags == [False, False, False, False, False, True]
	assert pyranose[5].label == "O"
	cyclohexane = ring_templates.ring_template("cyclohexane")
	assert not any(atom.is_ring_heteroatom for atom in cyclohexane)


#============================================
def test_templates_share_skeleton():
	cyclohexane = ring_templates.CYCLOHEXANE_TEMPLATE
	pyranose = ring_templates.PYRANOSE_TEMPLATE
	for left, right in zip(cyclohexane, pyranose):
		assert (left.x, left.y, left.axial_dir) == (right.x, right.y, right.axial_dir)


#============================================
def test_ring_bonds_close_the_ring():
	bonds = ring_templates.ring_bonds("cyclohexane")
	assert bonds == ((0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0))
	assert ring_templates.ring_bonds("pyranose") == bonds
