#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : error.py
created time : 2022/05/13
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""


class EnvironmentVariableError(Exception):
    """This error occurs when:
    - The environment variable is not supported

    Used in:
    - hilbertpy.environment
    """

    pass


class InvalidDimensionError(Exception):
    """This error occurs when:
    - The number of dimensions of a curve is not a positive integer
    - A curve with unsupported dimensions is visualized

    Used in:
    - hilbertpy.utils.check_curve
    - hilbertpy.utils.visualize
    """

    pass


class InvalidOrderError(Exception):
    """This error occurs when:
    - The number of bits per dimension (order) of a curve is negative

    Used in:
    - hilbertpy.utils.check_curve
    """

    pass


class WidthOverflowError(Exception):
    """This error occurs when:
    - num_dims * num_bits exceeds the word width held by hilbertpy.env

    Used in:
    - hilbertpy.utils.check_curve
    """

    pass


class ValueOutOfRangeError(Exception):
    """This error occurs when:
    - A packed point or a hilbert index is negative
    - A packed point or a hilbert index has set bits beyond num_dims * num_bits
    - A coordinate has set bits beyond num_bits

    Used in:
    - hilbertpy.utils.check_curve
    - hilbertpy.core.hilbert
    - hilbertpy.core.hilbert_curve
    """

    pass


class ArrayDimError(Exception):
    """This error occurs when:
    - The dimension of argument does not meet the requirement

    Used in:
    - hilbertpy.utils.check_curve
    - hilbertpy.core.hilbert_curve
    - hilbertpy.io.hdf5_lookup_table_writer
    """

    pass


class FileFormatError(Exception):
    """This error occurs when:
    - file suffix or prefix appears in an unexpected way

    Used in:
    - hilbertpy.io.hdf5_lookup_table_writer
    - hilbertpy.io.hdf5_lookup_table_parser
    - hilbertpy.io.log_writer
    """

    pass


class HDF5FilePoorDefinedError(Exception):
    """This error occurs when:
    - Use hdf5 file that does not meet the requirement of hilbertpy

    Used in:
    - hilbertpy.io.hdf5_lookup_table_parser
    """

    pass
