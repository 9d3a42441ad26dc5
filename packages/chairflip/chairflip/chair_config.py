#--------------------------------------------------------------------------
#     This file is part of CHAIRFLIP - a chair conformation python library
#--------------------------------------------------------------------------

"""Fixed constants shared by the chair geometry and strain-energy modules."""

# Standard Library
import os


# substituent bond lengths, shared by every ring atom
AXIAL_LENGTH = 45.0
EQUATORIAL_LENGTH = 40.0

# label anchors sit beyond the bond end
AXIAL_LABEL_OFFSET = 15.0
EQUATORIAL_LABEL_SCALE = 1.4

# vertical bias added to the outward radial unit vector of equatorial bonds
EQUATORIAL_SPLAY = 0.3

# both ring kinds share one 2D skeleton around this center
RING_CENTROID = (160.0, 160.0)
RING_SIZE = 6

# RT at 298 K in kcal/mol (R = 1.987 cal/(mol K))
RT_KCAL_PER_MOL = 0.592
# below this energy gap both conformers are reported at 50 percent
EQUAL_ENERGY_EPSILON = 0.001
# below this energy gap the text summary calls the chairs equal
DESCRIPTION_EPSILON = 0.01

DATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "chair_data"))
STRAIN_DATA_PATH = os.path.join(DATA_DIR, "strain_constants.json")
SUGAR_DATA_PATH = os.path.join(DATA_DIR, "sugar_templates.json")
