__author__ = "Zhenyu Wei"
__maintainer__ = "Zhenyu Wei"
__copyright__ = "(C)Copyright 2021-present, hilbertpy organization"
__license__ = "BSD"

from hilbertpy.core.hilbert import encode, decode
from hilbertpy.core.hilbert import entry_point, intra_axis, transform, transform_inverse
from hilbertpy.core.hilbert_curve import HilbertCurve
from hilbertpy.core.lookup_table import LookupTableGenerator

__all__ = [
    "encode",
    "decode",
    "entry_point",
    "intra_axis",
    "transform",
    "transform_inverse",
    "HilbertCurve",
    "LookupTableGenerator",
]
