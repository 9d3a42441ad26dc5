"""Unit tests for pyranose sugar template expansion."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_chairflip_to_sys_path()

import chairflip
from chairflip import molecule_state
from chairflip import sugar_templates


ALDOHEXOSES = ("glucose", "galactose", "mannose", "allose", "altrose", "gulose", "idose", "talose")


#============================================
def _anomeric(state):
	return [sub for sub in state.substituents if sub.carbon_index == 0]


#============================================
def test_beta_glucose_all_equatorial():
	state = sugar_templates.instantiate_sugar("glucose", "beta")
	assert state.ring_kind is chairflip.RingKind.PYRANOSE
	assert state.flipped is False
	assert state.sugar_type == "glucose"
	assert state.anomer is chairflip.Anomer.BETA
	assert len(state.substituents) == 5
	anomeric = _anomeric(state)
	assert len(anomeric) == 1
	assert anomeric[0].position == "equatorial"
	assert anomeric[0].group == "OH"
	assert all(sub.position == "equatorial" for sub in state.substituents)


#============================================
def test_alpha_glucose_has_axial_anomeric_hydroxyl():
	alpha = sugar_templates.instantiate_sugar("glucose", "alpha")
	beta = sugar_templates.instantiate_sugar("glucose", "beta")
	assert len(alpha.substituents) == 5
	assert _anomeric(alpha)[0].position == "axial"
	assert alpha.substituents[:4] == beta.substituents[:4]


#============================================
@pytest.mark.parametrize("sugar_key", ALDOHEXOSES)
def test_every_template_covers_carbons_one_to_four(sugar_key):
	template = sugar_templates.get_template(sugar_key)
	state = sugar_templates.instantiate_sugar(sugar_key, "beta")
	assert len(state.substituents) == len(template.substituents) + 1
	assert sorted(sub.carbon for sub in template.substituents) == [1, 2, 3, 4]
	assert molecule_state.get_substituent(state, 4, "equatorial") == "CH2OH"


#============================================
def test_galactose_and_mannose_epimers():
	galactose = sugar_templates.instantiate_sugar("galactose", "beta")
	assert molecule_state.get_substituent(galactose, 3, "axial") == "OH"
	mannose = sugar_templates.instantiate_sugar("mannose", "beta")
	assert molecule_state.get_substituent(mannose, 1, "axial") == "OH"


#============================================
def test_unknown_sugar_raises():
	with pytest.raises(sugar_templates.UnknownTemplateError) as error:
		sugar_templates.instantiate_sugar("fructose", "beta")
	assert error.value.sugar_key == "fructose"
	assert "fructose" in str(error.value)
	assert isinstance(error.value, ValueError)
	assert isinstance(error.value.__cause__, KeyError)


#============================================
def test_bad_anomer_raises():
	with pytest.raises(ValueError) as error:
		sugar_templates.instantiate_sugar("glucose", "gamma")
	assert "anomer" in str(error.value)


#============================================
def test_list_sugars_in_table_order():
	sugars = sugar_templates.list_sugars()
	assert tuple(summary.key for summary in sugars) == ALDOHEXOSES
	assert sugars[0].display_name == "D-Glucose"


#============================================
def test_toggle_anomer_resets_flip():
	state = molecule_state.flip_chair(sugar_templates.instantiate_sugar("glucose", "beta"))
	toggled = sugar_templates.toggle_anomer(state)
	assert toggled.anomer is chairflip.Anomer.ALPHA
	assert toggled.flipped is False
	assert _anomeric(toggled)[0].position == "axial"
	assert sugar_templates.toggle_anomer(toggled) == sugar_templates.instantiate_sugar("glucose", "beta")


#============================================
def test_change_sugar_type_keeps_anomer():
	state = molecule_state.flip_chair(sugar_templates.instantiate_sugar("glucose", "alpha"))
	changed = sugar_templates.change_sugar_type(state, "talose")
	assert changed.sugar_type == "talose"
	assert changed.anomer is chairflip.Anomer.ALPHA
	assert changed.flipped is False
	with pytest.raises(sugar_templates.UnknownTemplateError):
		sugar_templates.change_sugar_type(state, "ribose")


#============================================
def test_change_sugar_type_from_plain_ring_defaults_to_beta():
	changed = sugar_templates.change_sugar_type(molecule_state.create_molecule_state(), "glucose")
	assert changed.anomer is chairflip.Anomer.BETA


#============================================
def test_beta_glucose_is_strongly_favored():
	comparison = chairflip.compare_conformers(sugar_templates.instantiate_sugar("glucose", "beta"))
	assert comparison.preferred == "current"
	# three OH plus CH2OH (no tabulated A-value) plus anomeric OH
	assert comparison.energy_flipped == pytest.approx(4 * 0.87)
	assert comparison.percent_preferred == 100


#============================================
def test_toggle_anomer_on_state_built_from_text():
	state = molecule_state.MoleculeState(ring_kind="pyranose", sugar_type="glucose", anomer="alpha")
	toggled = sugar_templates.toggle_anomer(state)
	assert toggled == sugar_templates.instantiate_sugar("glucose", "beta")
