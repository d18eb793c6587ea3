#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Echantillonnage des surfaces d'un profil NACA.

Combine la loi d'epaisseur et la ligne moyenne pour produire :

- l'extrados (upper), parcouru du BF vers le BA (x = c -> 0)
- l'intrados (lower), parcouru du BA vers le BF (x = 0 -> c)
- la ligne moyenne (centerline), a pas fixe independant de la resolution
- la bande de bord d'attaque (leading_edge), petite boucle fermee autour
  du nez, de x = res vers le BA puis retour a x = res

La concatenation extrados + intrados forme un contour ferme, sans
auto-intersection, directement utilisable pour construire une forme.

Chaque surface est nettoyee independamment (:func:`filter_surface`) :
points non finis ecartes, puis points a moins de MIN_SPACING du dernier
point retenu ecartes (le premier point est toujours conserve).

@author: Nervures
@date: 2026-10
"""

import math
import logging
from collections import namedtuple

import numpy as np

from .camber import camber_y, slope_angle
from .errors import DegenerateSampleError, DomainViolation
from .thickness import half_thickness

logger = logging.getLogger(__name__)

MIN_SPACING = 1e-6          # unites de corde
CENTERLINE_STEP = 0.01      # fraction de corde
LEADING_EDGE_SAMPLES = 10
LEADING_EDGE_OFFSET = 0.5   # fraction de la resolution, en amont du BA


Surfaces = namedtuple('Surfaces',
                      ['upper', 'lower', 'centerline', 'leading_edge'])


def _empty():
    return np.zeros((0, 2), dtype=float)


def chord_stations(c, step):
    u"""Stations 0, step, 2.step, ... le long de la corde, c inclus.

    :param c: corde
    :type c: float
    :param step: pas d'echantillonnage (> 0)
    :type step: float
    :returns: stations croissantes dans [0, c]
    :rtype: numpy.ndarray
    """
    n = int(math.floor(c / step + 1e-9))
    x = np.arange(n + 1, dtype=float) * step
    x = x[x <= c]
    if c - x[-1] > MIN_SPACING * c:
        x = np.append(x, c)
    else:
        x[-1] = c
    return x


def surface_points(x, params, upper=True, close_trailing_edge=True):
    u"""Points de l'extrados ou de l'intrados aux stations x.

    Extrados : (x - yt.sin(theta), yc + yt.cos(theta))
    Intrados : (x + yt.sin(theta), yc - yt.cos(theta))

    :param x: stations dans [0, c]
    :type x: numpy.ndarray
    :param params: parametres du profil
    :type params: AirfoilParameters
    :param upper: True pour l'extrados, False pour l'intrados
    :type upper: bool
    :param close_trailing_edge: bord de fuite ferme
    :type close_trailing_edge: bool
    :returns: points, ndarray(n, 2) (peut contenir des NaN)
    :rtype: numpy.ndarray
    :raises DomainViolation: si une station sort de [0, c]
    """
    c = params.chord
    m = params.max_camber
    p = params.camber_position
    x = np.atleast_1d(np.asarray(x, dtype=float))
    yt = half_thickness(x, c, params.thickness, close_trailing_edge)
    # Stations dans la tolerance ramenees sur [0, c]
    x = np.clip(x, 0.0, c)
    yc = camber_y(x, c, m, p)
    theta = slope_angle(x, c, m, p)
    sign = 1.0 if upper else -1.0
    with np.errstate(invalid='ignore'):
        px = x - sign * yt * np.sin(theta)
        py = yc + sign * yt * np.cos(theta)
    return np.column_stack([px, py])


def surface_point(x, params, upper=True, close_trailing_edge=True):
    u"""Point unique de l'extrados ou de l'intrados a la station x.

    :returns: point (x, y)
    :rtype: numpy.ndarray, shape (2,)
    :raises DegenerateSampleError: si une coordonnee n'est pas finie
    :raises DomainViolation: si x sort de [0, c]
    """
    pt = surface_points([x], params, upper, close_trailing_edge)[0]
    if not np.all(np.isfinite(pt)):
        raise DegenerateSampleError(
            u"Echantillon non fini a x=%g : (%s, %s)" % (x, pt[0], pt[1]))
    return pt


def filter_surface(points, min_spacing=MIN_SPACING):
    u"""Nettoie une surface echantillonnee.

    1. Ecarte les points dont une coordonnee n'est pas finie.
    2. Ecarte les points a moins de ``min_spacing`` du dernier point
       retenu (le premier point est toujours conserve).

    :param points: points bruts, ndarray(n, 2)
    :type points: numpy.ndarray
    :param min_spacing: distance minimale entre points consecutifs
    :type min_spacing: float
    :returns: points nettoyes, ndarray(k, 2), k <= n
    :rtype: numpy.ndarray
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    finite = np.all(np.isfinite(pts), axis=1)
    n_bad = int(np.count_nonzero(~finite))
    if n_bad:
        logger.debug(u"%d echantillon(s) non fini(s) ecarte(s)", n_bad)
    pts = pts[finite]
    if len(pts) == 0:
        return _empty()

    kept = [pts[0]]
    for pt in pts[1:]:
        last = kept[-1]
        if math.hypot(pt[0] - last[0], pt[1] - last[1]) >= min_spacing:
            kept.append(pt)
    if len(kept) < len(pts):
        logger.debug(u"%d point(s) quasi confondu(s) ecarte(s)",
                     len(pts) - len(kept))
    return np.array(kept)


def _leading_edge_band(params, resolution, close_trailing_edge):
    u"""Boucle de points autour du nez : extrados de x=res au BA, puis
    intrados du BA a x=res.

    Les stations en amont du BA (x < 0) sont hors du domaine de la loi
    d'epaisseur : elles sont ramenees au BA.
    """
    c = params.chord
    stations = np.linspace(-LEADING_EDGE_OFFSET * resolution,
                           min(resolution, c), LEADING_EDGE_SAMPLES)
    band = []
    for upper, xs in ((True, stations[::-1]), (False, stations)):
        for x in xs:
            try:
                pt = surface_point(x, params, upper, close_trailing_edge)
            except DomainViolation:
                x_clamped = min(max(x, 0.0), c)
                logger.debug(u"Station %g hors corde ramenee a %g",
                             x, x_clamped)
                try:
                    pt = surface_point(x_clamped, params, upper,
                                       close_trailing_edge)
                except DegenerateSampleError as e:
                    logger.debug(u"%s", e)
                    continue
            except DegenerateSampleError as e:
                logger.debug(u"%s", e)
                continue
            band.append(pt)
    if not band:
        return _empty()
    return np.array(band)


def build_surfaces(params, resolution, close_trailing_edge=True,
                   leading_edge=True):
    u"""Echantillonne toutes les surfaces d'un profil.

    :param params: parametres du profil (voir :func:`code.parse_code`)
    :type params: AirfoilParameters
    :param resolution: pas d'echantillonnage le long de la corde (> 0)
    :type resolution: float
    :param close_trailing_edge: bord de fuite ferme (k=0.1036) ou ouvert
    :type close_trailing_edge: bool
    :param leading_edge: calculer la bande de bord d'attaque
    :type leading_edge: bool
    :returns: (upper, lower, centerline, leading_edge), ndarray(n, 2)
        chacune ; leading_edge est vide si non demandee
    :rtype: Surfaces
    :raises ValueError: si la resolution n'est pas un reel > 0
    """
    res = float(resolution)
    if not math.isfinite(res) or res <= 0.0:
        raise ValueError(
            u"La resolution doit etre > 0, recu %r" % (resolution,))

    c = params.chord
    x = chord_stations(c, res)
    # Extrados BF -> BA, intrados BA -> BF
    upper = surface_points(x[::-1], params, True, close_trailing_edge)
    lower = surface_points(x, params, False, close_trailing_edge)

    xc = chord_stations(c, CENTERLINE_STEP * c)
    centerline = np.column_stack(
        [xc, camber_y(xc, c, params.max_camber, params.camber_position)])

    if leading_edge:
        band = _leading_edge_band(params, res, close_trailing_edge)
    else:
        band = _empty()

    surfaces = Surfaces(filter_surface(upper), filter_surface(lower),
                        filter_surface(centerline), filter_surface(band))
    logger.debug(u"NACA %s : %d pts extrados, %d pts intrados, "
                 u"%d pts ligne moyenne, %d pts bande BA",
                 params.code, len(surfaces.upper), len(surfaces.lower),
                 len(surfaces.centerline), len(surfaces.leading_edge))
    return surfaces
