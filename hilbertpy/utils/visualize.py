#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
file : visualize.py
created time : 2022/05/20
author : Zhenyu Wei
copyright : (C)Copyright 2021-present, hilbertpy organization
"""

import numpy as np
import matplotlib.pyplot as plt
from hilbertpy.error import *

SUPPORTED_VISUALIZE_DIMS = [2, 3]


def plot_curve(curve, ax=None, **kwargs):
    """Draw the path of a 2D or 3D hilbert curve

    Parameters
    ----------
    curve : hilbertpy.core.HilbertCurve
        curve to be drawn
    ax : matplotlib.axes.Axes, optional
        target axes, a new figure will be created if None is provided. A 3D
        axes is required for 3D curve
    kwargs :
        keyword arguments passed to ``ax.plot``

    Returns
    -------
    matplotlib.axes.Axes
        axes containing the curve
    """
    if curve.num_dims not in SUPPORTED_VISUALIZE_DIMS:
        raise InvalidDimensionError(
            "Only curves with %s dimensions can be visualized, while %d provided"
            % (SUPPORTED_VISUALIZE_DIMS, curve.num_dims)
        )
    points = np.array(
        [curve.decode_coordinates(index) for index in range(curve.length)]
    ).reshape([curve.length, curve.num_dims])
    if ax is None:
        fig = plt.figure()
        if curve.num_dims == 3:
            ax = fig.add_subplot(projection="3d")
        else:
            ax = fig.add_subplot()
            ax.set_aspect("equal")
    ax.plot(*[points[:, axis] for axis in range(curve.num_dims)], **kwargs)
    return ax
