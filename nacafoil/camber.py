#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Ligne moyenne (cambrure) NACA en deux branches.

Branche avant (x <= p.c) :
    yc = (c.m/p^2).(2.p.xi - xi^2)
Branche arriere (x > p.c) :
    yc = (c.m/(1-p)^2).((1 - 2.p) + 2.p.xi - xi^2)

La pente locale est theta = atan((m/p^2).(p - xi)) a l'avant et
atan((m/(1-p)^2).(p - xi)) a l'arriere.

Pour un profil symetrique (m = 0) la ligne moyenne est la corde.
Les cas mal conditionnes (p = 0 au bord d'attaque, p = 1 a l'arriere)
donnent NaN, sans exception : le sampler ecarte ces echantillons.

@author: Nervures
@date: 2026-10
"""

import numpy as np


def forward_camber(x, c, m, p):
    u"""Ordonnee de la ligne moyenne, formule de la branche avant."""
    c, m, p = np.float64(c), np.float64(m), np.float64(p)
    xi = np.asarray(x, dtype=float) / c
    with np.errstate(divide='ignore', invalid='ignore'):
        return (c * m / p**2) * (2.0 * p * xi - xi**2)


def aft_camber(x, c, m, p):
    u"""Ordonnee de la ligne moyenne, formule de la branche arriere."""
    c, m, p = np.float64(c), np.float64(m), np.float64(p)
    xi = np.asarray(x, dtype=float) / c
    with np.errstate(divide='ignore', invalid='ignore'):
        return (c * m / (1.0 - p)**2) * ((1.0 - 2.0 * p) + 2.0 * p * xi
                                         - xi**2)


def camber_y(x, c, m, p):
    u"""Ordonnee yc de la ligne moyenne a la station x.

    :param x: station(s) le long de la corde
    :type x: float or numpy.ndarray
    :param c: corde
    :type c: float
    :param m: cambrure maximale (fraction de corde)
    :type m: float
    :param p: position de la cambrure maximale (fraction de corde)
    :type p: float
    :returns: yc, meme forme que x
    :rtype: numpy.float64 or numpy.ndarray
    """
    x = np.asarray(x, dtype=float)
    if m == 0.0:
        return np.zeros_like(x)
    return np.where(x <= p * c, forward_camber(x, c, m, p),
                    aft_camber(x, c, m, p))


def slope_angle(x, c, m, p):
    u"""Angle theta (radians) de la tangente a la ligne moyenne.

    :param x: station(s) le long de la corde
    :type x: float or numpy.ndarray
    :returns: theta, meme forme que x
    :rtype: numpy.float64 or numpy.ndarray
    """
    x = np.asarray(x, dtype=float)
    if m == 0.0:
        return np.zeros_like(x)
    c, m, p = np.float64(c), np.float64(m), np.float64(p)
    xi = x / c
    with np.errstate(divide='ignore', invalid='ignore'):
        forward = np.arctan((m / p**2) * (p - xi))
        aft = np.arctan((m / (1.0 - p)**2) * (p - xi))
    return np.where(x <= p * c, forward, aft)
