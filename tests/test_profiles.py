#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Tests des lois d'epaisseur et de cambrure.

Lance :
    python -m unittest tests.test_profiles

@author: Nervures
@date: 2026-10
"""

import os
import sys
import math
import unittest

import numpy as np

# Ajouter la racine du depot au path
_here = os.path.dirname(os.path.abspath(__file__))
_root = os.path.normpath(os.path.join(_here, '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from nacafoil.thickness import half_thickness
from nacafoil.camber import camber_y, slope_angle, forward_camber, aft_camber
from nacafoil.errors import DomainViolation


def _reference_thickness(x, c, t, k):
    xi = x / c
    return 5 * t * c * (0.2969 * math.sqrt(xi) - 0.1260 * xi
                        - 0.3516 * xi**2 + 0.2843 * xi**3 - k * xi**4)


class TestHalfThickness(unittest.TestCase):
    u"""Loi d'epaisseur symetrique."""

    def test_zero_at_leading_edge(self):
        u"""yt(0) = 0 quels que soient t et c."""
        for c in (1.0, 10.0, 250.0):
            for t in (0.06, 0.12, 0.3):
                self.assertEqual(float(half_thickness(0.0, c, t)), 0.0)
                self.assertEqual(
                    float(half_thickness(0.0, c, t, False)), 0.0)

    def test_non_negative(self):
        u"""yt >= 0 sur ]0, c[."""
        for c in (1.0, 10.0):
            x = np.linspace(0.0, c, 1001)[1:-1]
            for close in (True, False):
                yt = half_thickness(x, c, 0.15, close)
                self.assertTrue(np.all(yt >= 0.0))

    def test_mid_chord_value(self):
        u"""NACA xx12, x=0.5 : valeur de la formule (~0.0529)."""
        yt = float(half_thickness(0.5, 1.0, 0.12, True))
        self.assertAlmostEqual(
            yt, _reference_thickness(0.5, 1.0, 0.12, 0.1036), places=12)
        self.assertAlmostEqual(yt, 0.0529, delta=1e-3)

    def test_matches_reference_formula(self):
        u"""Forme de Horner equivalente a la formule developpee."""
        c = 3.0
        for x in (0.01, 0.3, 1.2, 2.9):
            self.assertAlmostEqual(
                float(half_thickness(x, c, 0.12, False)),
                _reference_thickness(x, c, 0.12, 0.1015), places=12)

    def test_max_near_30_percent(self):
        u"""Demi-epaisseur maximale ~t/2 vers 30% de corde."""
        x = np.linspace(0.0, 1.0, 10001)
        yt = half_thickness(x, 1.0, 0.12)
        self.assertAlmostEqual(x[np.argmax(yt)], 0.30, delta=0.01)
        self.assertAlmostEqual(yt.max(), 0.06, delta=5e-4)

    def test_trailing_edge_closed_vs_open(self):
        u"""Bord de fuite : ferme ~0, ouvert > 0."""
        self.assertAlmostEqual(float(half_thickness(1.0, 1.0, 0.12, True)),
                               0.0, places=12)
        open_te = float(half_thickness(1.0, 1.0, 0.12, False))
        self.assertAlmostEqual(open_te, 5 * 0.12 * (0.1036 - 0.1015),
                               places=12)

    def test_vectorized(self):
        u"""Evaluation sur un tableau : meme forme en sortie."""
        x = np.linspace(0.0, 2.0, 7)
        self.assertEqual(half_thickness(x, 2.0, 0.1).shape, (7,))

    def test_domain_violation(self):
        u"""Station hors de [0, c] -> DomainViolation."""
        with self.assertRaises(DomainViolation):
            half_thickness(-0.01, 1.0, 0.12)
        with self.assertRaises(DomainViolation):
            half_thickness(1.01, 1.0, 0.12)
        with self.assertRaises(DomainViolation):
            half_thickness(np.array([0.0, 0.5, -1.0]), 1.0, 0.12)


class TestCamberLine(unittest.TestCase):
    u"""Ligne moyenne en deux branches."""

    def test_symmetric_is_zero(self):
        u"""m = 0 : ligne moyenne et pente nulles partout."""
        x = np.linspace(0.0, 10.0, 51)
        np.testing.assert_array_equal(camber_y(x, 10.0, 0.0, 0.0),
                                      np.zeros(51))
        np.testing.assert_array_equal(slope_angle(x, 10.0, 0.0, 0.0),
                                      np.zeros(51))

    def test_continuity_at_branch_point(self):
        u"""Les deux branches coincident en x = p.c."""
        for c in (1.0, 10.0, 123.4):
            for m, p in ((0.02, 0.4), (0.06, 0.2), (0.09, 0.9),
                         (0.04, 0.5)):
                xb = p * c
                fwd = float(forward_camber(xb, c, m, p))
                aft = float(aft_camber(xb, c, m, p))
                self.assertAlmostEqual(fwd, aft, delta=1e-9 * max(1.0, c))
                self.assertAlmostEqual(fwd, m * c, delta=1e-9 * max(1.0, c))

    def test_naca_2412_aft_branch(self):
        u"""2412, x=0.5 > p : branche arriere (~0.0194)."""
        y = float(camber_y(0.5, 1.0, 0.02, 0.4))
        self.assertEqual(y, float(aft_camber(0.5, 1.0, 0.02, 0.4)))
        self.assertAlmostEqual(y, 0.02 / 0.36 * 0.35, places=12)
        self.assertGreater(y, 0.0)

    def test_forward_branch(self):
        u"""x <= p.c : branche avant."""
        y = float(camber_y(0.2, 1.0, 0.02, 0.4))
        self.assertEqual(y, float(forward_camber(0.2, 1.0, 0.02, 0.4)))
        self.assertAlmostEqual(y, 0.02 / 0.16 * (0.16 - 0.04), places=12)

    def test_max_camber_at_position(self):
        u"""Maximum m.c atteint en x = p.c."""
        x = np.linspace(0.0, 2.0, 2001)
        yc = camber_y(x, 2.0, 0.04, 0.4)
        self.assertAlmostEqual(x[np.argmax(yc)], 0.8, delta=1e-3)
        self.assertAlmostEqual(yc.max(), 0.08, places=6)

    def test_slope_sign(self):
        u"""Pente positive a l'avant, nulle en p, negative a l'arriere."""
        self.assertGreater(float(slope_angle(0.1, 1.0, 0.02, 0.4)), 0.0)
        self.assertAlmostEqual(float(slope_angle(0.4, 1.0, 0.02, 0.4)),
                               0.0, places=12)
        self.assertLess(float(slope_angle(0.9, 1.0, 0.02, 0.4)), 0.0)

    def test_slope_matches_derivative(self):
        u"""theta = atan de la derivee (m/p^2).(p - xi)."""
        theta = float(slope_angle(0.25, 1.0, 0.02, 0.4))
        self.assertAlmostEqual(theta, math.atan(0.02 / 0.16 * 0.15),
                               places=12)

    def test_degenerate_position_gives_nan(self):
        u"""p = 0 au bord d'attaque : NaN, sans exception."""
        self.assertTrue(np.isnan(camber_y(0.0, 1.0, 0.02, 0.0)))
        self.assertTrue(np.isnan(slope_angle(0.0, 1.0, 0.02, 0.0)))
        # Hors du point singulier : branche arriere finie
        self.assertTrue(np.isfinite(camber_y(0.5, 1.0, 0.02, 0.0)))


if __name__ == '__main__':
    unittest.main()
