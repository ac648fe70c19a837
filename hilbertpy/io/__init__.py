__author__ = "Zhenyu Wei"
__maintainer__ = "Zhenyu Wei"
__copyright__ = "(C)Copyright 2021-present, hilbertpy organization"
__license__ = "BSD"

# Lookup table file
from hilbertpy.io.hdf5_lookup_table_writer import HDF5LookupTableWriter
from hilbertpy.io.hdf5_lookup_table_parser import HDF5LookupTableParser

## HDF5
HDF5_FILE_HIERARCHY = """Hierarchy of HDF5 lookup table file created by hilbertpy
+-- '/'
|   +-- attribute "word_width" int
|   |
|   +-- dataset "num_dims" int
|   |
|   +-- dataset "num_bits" int
|   |
|   +-- dataset "points_index" int, shape [2^(num_dims*num_bits), num_dims]
|   |
|   +-- dataset "lookup_table" int, shape [2^num_bits] * num_dims
|
"""

# Other file
from hilbertpy.io.log_writer import LogWriter

__all__ = [
    "HDF5LookupTableWriter",
    "HDF5LookupTableParser",
    "HDF5_FILE_HIERARCHY",
    "LogWriter",
]
