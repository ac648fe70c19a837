__author__ = "Zhenyu Wei"
__maintainer__ = "Zhenyu Wei"
__copyright__ = "(C)Copyright 2021-present, hilbertpy organization"
__license__ = "BSD"

from hilbertpy.utils.bit import bit, with_bit, mask
from hilbertpy.utils.bit import log2floor, trailing_ones
from hilbertpy.utils.bit import read_digit, write_digit, to_binary_string
from hilbertpy.utils.gray_code import gray_encode, gray_decode
from hilbertpy.utils.rotation import rotate_right, rotate_left
from hilbertpy.utils.interlace import interlace, deinterlace
from hilbertpy.utils.check_curve import check_num_dims, check_num_bits
from hilbertpy.utils.check_curve import check_curve, check_curve_value, check_coordinates
from hilbertpy.utils.visualize import plot_curve

__all__ = [
    'bit', 'with_bit', 'mask',
    'log2floor', 'trailing_ones',
    'read_digit', 'write_digit', 'to_binary_string',
    'gray_encode', 'gray_decode',
    'rotate_right', 'rotate_left',
    'interlace', 'deinterlace',
    'check_num_dims', 'check_num_bits',
    'check_curve', 'check_curve_value', 'check_coordinates',
    'plot_curve'
]
