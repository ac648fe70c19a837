#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : lookup_table.py
created time : 2022/05/20
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import numpy as np
from typing import Tuple
from hilbertpy import env, SPATIAL_DIM
from hilbertpy.core.hilbert_curve import HilbertCurve


class LookupTableGenerator:
    def __init__(self, num_bits: int, num_dims: int = SPATIAL_DIM) -> None:
        self._curve = HilbertCurve(num_dims, num_bits)
        self._num_bits = self._curve.num_bits
        self._num_dims = self._curve.num_dims
        # attribute
        self._num_single_dim_points = 2**self._num_bits
        self._num_points = self._curve.length

    def generate(self) -> Tuple[np.ndarray]:
        """Generate the lookup tables of the curve

        Returns
        -------
        Tuple[np.ndarray]
            points_index with shape [num_points, num_dims], row h contains
            the coordinates of hilbert index h; lookup_table with shape
            [2^num_bits] * num_dims containing the hilbert index of each
            coordinate
        """
        points_index = np.array(
            [self._curve.decode_coordinates(i) for i in range(self._num_points)],
            env.NUMPY_INT,
        ).reshape([self._num_points, self._num_dims])
        lookup_table = np.zeros([self._num_single_dim_points] * self._num_dims, env.NUMPY_INT)
        lookup_table[tuple(points_index.T)] = np.arange(self._num_points)
        return points_index, lookup_table

    @property
    def curve(self) -> HilbertCurve:
        return self._curve

    @property
    def num_bits(self) -> int:
        return self._num_bits

    @property
    def num_dims(self) -> int:
        return self._num_dims

    @property
    def num_points(self) -> int:
        return self._num_points
