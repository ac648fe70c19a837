#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : hilbert_curve.py
created time : 2022/05/14
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import numpy as np
from hilbertpy import env
from hilbertpy.core.hilbert import encode, decode
from hilbertpy.utils import check_curve, check_coordinates
from hilbertpy.utils import interlace, deinterlace, to_binary_string
from hilbertpy.error import *


class HilbertCurve:
    def __init__(self, num_dims: int, num_bits: int) -> None:
        self._num_dims, self._num_bits = check_curve(num_dims, num_bits)
        self._width = self._num_dims * self._num_bits
        self._length = 1 << self._width

    def __repr__(self) -> str:
        return "<hilbertpy.HilbertCurve object: %d dims, %d bits>" % (
            self._num_dims,
            self._num_bits,
        )

    __str__ = __repr__

    def __len__(self) -> int:
        return self._length

    def encode(self, point: int) -> int:
        return encode(point, self._num_dims, self._num_bits)

    def decode(self, index: int) -> int:
        return decode(index, self._num_dims, self._num_bits)

    def encode_coordinates(self, coordinates) -> int:
        coordinates = check_coordinates(coordinates, self._num_dims, self._num_bits)
        return self.encode(interlace(coordinates, self._num_bits))

    def decode_coordinates(self, index: int) -> tuple:
        return deinterlace(self.decode(index), self._num_dims, self._num_bits)

    def _check_array(self, array) -> np.ndarray:
        array = np.asarray(array)
        if array.ndim != 1:
            raise ArrayDimError(
                "A 1D array is required, while array with shape %s provided"
                % list(array.shape)
            )
        return array

    def encode_array(self, points) -> np.ndarray:
        points = self._check_array(points)
        return np.array([self.encode(i) for i in points], dtype=env.NUMPY_UINT)

    def decode_array(self, indices) -> np.ndarray:
        indices = self._check_array(indices)
        return np.array([self.decode(i) for i in indices], dtype=env.NUMPY_UINT)

    def to_binary_string(self, x: int) -> str:
        return to_binary_string(x, self._width)

    @property
    def num_dims(self) -> int:
        return self._num_dims

    @property
    def num_bits(self) -> int:
        return self._num_bits

    @property
    def width(self) -> int:
        return self._width

    @property
    def length(self) -> int:
        return self._length
