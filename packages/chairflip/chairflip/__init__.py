#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Chair conformation geometry and ring-flip strain energies."""

# local repo modules
from .vocabulary import Anomer
from .vocabulary import Conformer
from .vocabulary import Position
from .vocabulary import RingKind
from .ring_templates import RingAtom
from .ring_templates import ring_bonds
from .ring_templates import ring_template
from .ring_geometry import RingAtomView
from .ring_geometry import SubstituentVector
from .ring_geometry import axial_direction
from .ring_geometry import label_positions
from .ring_geometry import ring_coordinates
from .ring_geometry import substituent_vector
from .molecule_state import MoleculeState
from .molecule_state import Substituent
from .molecule_state import create_molecule_state
from .molecule_state import export_basename
from .molecule_state import flip_chair
from .molecule_state import get_substituent
from .molecule_state import remove_substituent
from .molecule_state import reset_molecule
from .molecule_state import set_substituent
from .molecule_state import sorted_substituents
from .molecule_state import substituent_summary
from .conformer_energy import ConformerComparison
from .conformer_energy import compare_conformers
from .conformer_energy import format_energy
from .conformer_energy import list_known_substituents
from .conformer_energy import preferred_description
from .conformer_energy import resolved_position
from .conformer_energy import strain_constant
from .conformer_energy import strain_energy
from .sugar_templates import UnknownTemplateError
from .sugar_templates import change_sugar_type
from .sugar_templates import instantiate_sugar
from .sugar_templates import list_sugars
from .sugar_templates import toggle_anomer

__version__ = "0.1.0"
