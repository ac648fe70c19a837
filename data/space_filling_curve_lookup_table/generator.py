#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : generator.py
created time : 2022/05/20
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import os, sys, argparse

cur_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.append(os.path.join(cur_dir, "../.."))
from hilbertpy import SPATIAL_DIM
from hilbertpy.core import LookupTableGenerator
from hilbertpy.io import HDF5LookupTableWriter

parser = argparse.ArgumentParser(description="Generate hilbert curve lookup table")
parser.add_argument("-b", "--num-bits", type=int, default=6)
parser.add_argument("-d", "--num-dims", type=int, default=SPATIAL_DIM)
args = parser.parse_args()

if __name__ == "__main__":
    generator = LookupTableGenerator(args.num_bits, args.num_dims)
    points_index, lookup_table = generator.generate()

    file_path = os.path.join(
        cur_dir, "hilbert_%d_dims_%d_bits.hdf5" % (args.num_dims, args.num_bits)
    )
    HDF5LookupTableWriter(file_path).write(points_index, lookup_table)
    print("%d points written to %s" % (generator.num_points, file_path))
