"""Load substituent A-values from the packaged JSON file."""

# Standard Library
import json
import types

# local repo modules
from .chair_config import STRAIN_DATA_PATH


#============================================
def _load_strain_constants():
	"""Load A-values (kcal/mol) into a read-only, insertion-ordered mapping."""
	with open(STRAIN_DATA_PATH, "r") as handle:
		raw_data = json.load(handle)
	constants = {}
	for group, value in raw_data.items():
		value = float(value)
		if value < 0:
			raise ValueError(f"negative strain constant for {group!r}: {value}")
		constants[str(group)] = value
	return types.MappingProxyType(constants)


strain_constants = _load_strain_constants()
