#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : hdf5_lookup_table_writer.py
created time : 2022/05/20
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import h5py
import numpy as np
from hilbertpy import env
from hilbertpy.utils import check_curve
from hilbertpy.error import *


class HDF5LookupTableWriter:
    def __init__(self, file_path: str, mode: str = "w") -> None:
        if not file_path.endswith(".hdf5"):
            raise FileFormatError("The file should end with .hdf5 suffix")
        self._file_path = file_path
        self._mode = mode
        with h5py.File(self._file_path, self._mode) as f:
            f.attrs["word_width"] = env.word_width

    def write(self, points_index: np.ndarray, lookup_table: np.ndarray):
        num_points, num_dims = self._check_points_index(points_index)
        num_bits = self._check_lookup_table(lookup_table, num_points, num_dims)
        with h5py.File(self._file_path, "a") as h5f:
            for key in ["num_dims", "num_bits", "points_index", "lookup_table"]:
                if key in h5f:
                    del h5f[key]
            h5f["num_dims"] = num_dims
            h5f["num_bits"] = num_bits
            h5f["points_index"] = points_index.astype(env.NUMPY_INT)
            h5f["lookup_table"] = lookup_table.astype(env.NUMPY_INT)

    def _check_points_index(self, points_index: np.ndarray):
        shape = points_index.shape
        if len(shape) != 2:
            raise ArrayDimError(
                "points_index should be a 2D array, while array with shape %s is provided"
                % list(shape)
            )
        return shape

    def _check_lookup_table(self, lookup_table: np.ndarray, num_points: int, num_dims: int):
        shape = lookup_table.shape
        num_single_dim_points = shape[0] if len(shape) != 0 else 0
        num_bits = int(num_single_dim_points).bit_length() - 1
        is_shape_error = len(shape) != num_dims or num_single_dim_points < 1
        if not is_shape_error and any([i != num_single_dim_points for i in shape]):
            is_shape_error = True
        if not is_shape_error and num_single_dim_points != 1 << num_bits:
            is_shape_error = True
        if not is_shape_error and num_single_dim_points**num_dims != num_points:
            is_shape_error = True
        if is_shape_error:
            raise ArrayDimError(
                "lookup_table with shape %s does not match points_index of %d points in %d dimensions"
                % (list(shape), num_points, num_dims)
            )
        check_curve(num_dims, num_bits)
        return num_bits
