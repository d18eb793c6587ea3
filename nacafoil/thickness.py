#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Loi d'epaisseur symetrique NACA.

    yt = 5.t.c.(0.2969.sqrt(xi) - 0.1260.xi - 0.3516.xi^2
                + 0.2843.xi^3 - k.xi^4),   xi = x/c

k = 0.1036 pour un bord de fuite ferme, 0.1015 pour le bord de fuite
legerement ouvert de la definition d'origine.

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .errors import DomainViolation

A0 = 0.2969
A1 = -0.1260
A2 = -0.3516
A3 = 0.2843
A4_CLOSED = -0.1036
A4_OPEN = -0.1015

# Tolerance relative sur les bornes [0, c] (arrondis d'echantillonnage)
_DOMAIN_TOL = 1e-12


def half_thickness(x, c, t, close_trailing_edge=True):
    u"""Demi-epaisseur yt du profil a la station x.

    :param x: station(s) le long de la corde, dans [0, c]
    :type x: float or numpy.ndarray
    :param c: corde
    :type c: float
    :param t: epaisseur relative (fraction de corde)
    :type t: float
    :param close_trailing_edge: bord de fuite ferme (k=0.1036) ou ouvert
    :type close_trailing_edge: bool
    :returns: demi-epaisseur, meme forme que x
    :rtype: numpy.float64 or numpy.ndarray
    :raises DomainViolation: si une station sort de [0, c]
    """
    x = np.asarray(x, dtype=float)
    tol = _DOMAIN_TOL * abs(c)
    if np.any(x < -tol) or np.any(x > c + tol):
        raise DomainViolation(
            u"Station hors de la corde [0, %g] : %s" % (c, x))
    xi = np.clip(x / c, 0.0, 1.0)
    a4 = A4_CLOSED if close_trailing_edge else A4_OPEN
    poly = A0 * np.sqrt(xi) + xi * (A1 + xi * (A2 + xi * (A3 + xi * a4)))
    return 5.0 * t * c * poly
