#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Package nacafoil : section 2D de profils NACA 4 et 5 chiffres.

Lecture de la designation, lois d'epaisseur et de cambrure,
echantillonnage des surfaces, enveloppe convexe avec remplissage.

Usage::

    from nacafoil import AirfoilGeometry

    g = AirfoilGeometry('2412', chord=1.0, resolution=0.01)
    g.get_upper()
    g.write('naca2412.dat')

@author: Nervures
@date: 2026-10
"""

from .errors import (NacaFoilError, InvalidCodeError, DomainViolation,
                     DegenerateSampleError)
from .code import AirfoilParameters, parse_code, FOUR_DIGIT, FIVE_DIGIT
from .thickness import half_thickness
from .camber import camber_y, slope_angle
from .sampler import Surfaces, build_surfaces, filter_surface
from .hull import monotone_chains, build_hull_with_interior
from .geometry import AirfoilGeometry, scale_transform, mirror_transform
from .foilconfig import read_config, geometry_kwargs, geometry_defaults
