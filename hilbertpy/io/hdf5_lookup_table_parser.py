#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : hdf5_lookup_table_parser.py
created time : 2022/05/20
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import h5py
import numpy as np
from hilbertpy import env
from hilbertpy.core import HilbertCurve
from hilbertpy.error import *

ROOT_KEYS = ["num_dims", "num_bits", "points_index", "lookup_table"]


class HDF5LookupTableParser:
    def __init__(self, file_path: str) -> None:
        if not file_path.endswith(".hdf5"):
            raise FileFormatError("The file should end with .hdf5 suffix")
        self._file_path = file_path
        with h5py.File(self._file_path, "r") as f:
            self._check_hdf5_file(f)
            self._num_dims = int(f["num_dims"][()])
            self._num_bits = int(f["num_bits"][()])
            self._points_index = np.array(f["points_index"][()], env.NUMPY_INT)
            self._lookup_table = np.array(f["lookup_table"][()], env.NUMPY_INT)
        self._curve = HilbertCurve(self._num_dims, self._num_bits)
        self._check_shape()

    def _check_hdf5_file(self, f: h5py.File):
        keys = list(f.keys())
        for key in ROOT_KEYS:
            if key not in keys:
                raise HDF5FilePoorDefinedError(
                    "%s does not contain the required %s dataset" % (self._file_path, key)
                )

    def _check_shape(self):
        num_points = self._curve.length
        if list(self._points_index.shape) != [num_points, self._num_dims]:
            raise HDF5FilePoorDefinedError(
                "points_index with shape %s mismatches a curve with %d dims and %d bits"
                % (list(self._points_index.shape), self._num_dims, self._num_bits)
            )
        if list(self._lookup_table.shape) != [2**self._num_bits] * self._num_dims:
            raise HDF5FilePoorDefinedError(
                "lookup_table with shape %s mismatches a curve with %d dims and %d bits"
                % (list(self._lookup_table.shape), self._num_dims, self._num_bits)
            )

    @property
    def num_dims(self) -> int:
        return self._num_dims

    @property
    def num_bits(self) -> int:
        return self._num_bits

    @property
    def curve(self) -> HilbertCurve:
        return self._curve

    @property
    def points_index(self) -> np.ndarray:
        return self._points_index

    @property
    def lookup_table(self) -> np.ndarray:
        return self._lookup_table
