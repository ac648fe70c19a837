__author__ = "Zhenyu Wei"
__maintainer__ = "Zhenyu Wei"
__copyright__ = "(C)Copyright 2021-present, hilbertpy organization"
__license__ = "BSD"

# Constant
SPATIAL_DIM = 3

# Import
from hilbertpy.environment import env
import hilbertpy.utils as utils
import hilbertpy.core as core
import hilbertpy.io as io
from hilbertpy.core import encode, decode, HilbertCurve

__all__ = ["env", "encode", "decode", "HilbertCurve"]
