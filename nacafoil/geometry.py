#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Objet metier : section 2D d'un profil NACA 4 ou 5 chiffres.

Construit en une seule passe a partir d'une designation NACA :
lecture du code -> echantillonnage des surfaces -> [enveloppe convexe
et remplissage] -> stockage. L'instance est ensuite en lecture seule ;
une nouvelle designation ou resolution demande une nouvelle instance.

Creation::

    # Directe
    g = AirfoilGeometry('2412', chord=1.0, resolution=0.01)

    # Nuage plein (enveloppe convexe + points interieurs)
    g = AirfoilGeometry('0012', chord=10.0, resolution=0.1,
                        convex_hull=True)

    # Depuis les parametres par defaut (defaults_geometry.cfg)
    g = AirfoilGeometry.from_config('23012', {'CHORD': 200.0})

Acces aux surfaces (echelle et transformation optionnelles)::

    g.get_upper()                       # (x.s, y.s)
    g.get_lower(scale=2.0)              # (x.s, y.s), sous la corde
    g.get_lower(1.0, mirror_transform)  # (x.s, -y.s), axe y vers le bas
    g.get_upper(1.0, lambda p, s: (p[1], p[0]))

@author: Nervures
@date: 2026-10
"""

import logging

import numpy as np
from scipy.optimize import minimize_scalar

from .camber import camber_y
from .code import parse_code
from .foilconfig import geometry_defaults
from .hull import build_hull_with_interior
from .sampler import build_surfaces, filter_surface
from .thickness import half_thickness

logger = logging.getLogger(__name__)

# Pas de sous-echantillonnage de get_all_points(sampled=True)
SAMPLE_STRIDE = 10000

# Formats d'ecriture des coordonnees
FORMATS = ('selig', 'csv')


def scale_transform(point, scale):
    u"""Transformation par defaut : homothetie de rapport ``scale``."""
    return (point[0] * scale, point[1] * scale)


def mirror_transform(point, scale):
    u"""Homothetie de rapport ``scale`` et symetrie par rapport a la corde
    (repere a axe y descendant). A passer explicitement aux acces."""
    return (point[0] * scale, -point[1] * scale)


def _frozen(points):
    arr = np.array(points, dtype=float).reshape(-1, 2)
    arr.flags.writeable = False
    return arr


class AirfoilGeometry(object):
    u"""Section 2D d'un profil NACA : surfaces et nuage de points.

    Surfaces stockees (ndarray(n, 2), lecture seule) :

    - extrados : BF -> BA
    - intrados : BA -> BF
    - ligne moyenne : BA -> BF, sans epaisseur
    - bande de bord d'attaque : boucle autour du nez
    - points : contour extrados + intrados, ou nuage plein en mode
      enveloppe convexe
    """

    def __init__(self, code='0015', chord=1.0, resolution=0.01,
                 close_airfoils=True, convex_hull=False, leading_edge=True):
        u"""
        :param code: designation NACA, 4 ou 5 chiffres
        :type code: str
        :param chord: longueur de corde (> 0)
        :type chord: float
        :param resolution: pas d'echantillonnage le long de la corde (> 0)
        :type resolution: float
        :param close_airfoils: bord de fuite ferme (True) ou ouvert
        :type close_airfoils: bool
        :param convex_hull: remplacer le contour par l'enveloppe convexe
            et son remplissage interieur
        :type convex_hull: bool
        :param leading_edge: calculer la bande de bord d'attaque
        :type leading_edge: bool
        :raises InvalidCodeError: designation invalide
        :raises ValueError: corde ou resolution invalide
        """
        params = parse_code(code, chord)
        surfaces = build_surfaces(params, resolution,
                                  close_trailing_edge=close_airfoils,
                                  leading_edge=leading_edge)
        outline = filter_surface(np.vstack([surfaces.upper, surfaces.lower]))
        if convex_hull:
            points = build_hull_with_interior(outline)
        else:
            points = outline

        self._params = params
        self._resolution = float(resolution)
        self._close_airfoils = bool(close_airfoils)
        self._convex_hull = bool(convex_hull)
        self._upper = _frozen(surfaces.upper)
        self._lower = _frozen(surfaces.lower)
        self._centerline = _frozen(surfaces.centerline)
        self._leading_edge = _frozen(surfaces.leading_edge)
        self._outline = _frozen(outline)
        self._points = _frozen(points)

        logger.info(u"%s : corde=%g, resolution=%g, %d points%s",
                    self.name, params.chord, self._resolution,
                    len(self._points),
                    u" (enveloppe convexe)" if convex_hull else u"")

    @classmethod
    def from_config(cls, code, params=None):
        u"""Construit un profil a partir des parametres par defaut.

        :param code: designation NACA
        :type code: str
        :param params: parametres utilisateur (CHORD, RESOLUTION,
            CLOSE_AIRFOILS, CONVEX_HULL, LEADING_EDGE), surchargent
            defaults_geometry.cfg
        :type params: dict or None
        :rtype: AirfoilGeometry
        """
        return cls(code, **geometry_defaults(params))

    # ------------------------------------------------------------------
    #  Representation
    # ------------------------------------------------------------------

    def __repr__(self):
        return "AirfoilGeometry('%s', %d pts)" % (self.name, len(self._points))

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def name(self):
        return 'NACA %s' % self._params.code

    @property
    def code(self):
        return self._params.code

    @property
    def parameters(self):
        u"""Parametres du profil (AirfoilParameters)."""
        return self._params

    @property
    def chord(self):
        return self._params.chord

    @property
    def resolution(self):
        return self._resolution

    @property
    def close_airfoils(self):
        return self._close_airfoils

    @property
    def convex_hull(self):
        return self._convex_hull

    @property
    def is_five_digit(self):
        return self._params.is_five_digit

    @property
    def upper(self):
        u"""Extrados, BF -> BA, ndarray(n, 2) en lecture seule."""
        return self._upper

    @property
    def lower(self):
        u"""Intrados, BA -> BF, ndarray(n, 2) en lecture seule."""
        return self._lower

    @property
    def centerline(self):
        return self._centerline

    @property
    def leading_edge_band(self):
        return self._leading_edge

    @property
    def outline(self):
        u"""Contour ferme extrados + intrados, ndarray(n, 2)."""
        return self._outline

    @property
    def points(self):
        u"""Nuage de points complet (contour ou enveloppe + remplissage)."""
        return self._points

    @property
    def relative_thickness(self):
        u"""Epaisseur relative maximale (e/c), sans unite."""
        return self.max_thickness()[1] / self.chord

    @property
    def relative_camber(self):
        u"""Cambrure relative maximale (f/c), sans unite."""
        return self.max_camber()[1] / self.chord

    # ------------------------------------------------------------------
    #  Acces aux surfaces
    # ------------------------------------------------------------------

    @staticmethod
    def _view(surface, scale, transform):
        out = [transform((float(x), float(y)), scale) for x, y in surface]
        return np.array(out, dtype=float).reshape(-1, 2)

    def get_upper(self, scale=1.0, transform=None):
        u"""Extrados transforme.

        :param scale: facteur d'echelle
        :type scale: float
        :param transform: fonction (point, scale) -> point
            (defaut : :func:`scale_transform`)
        :returns: ndarray(n, 2)
        """
        return self._view(self._upper, scale, transform or scale_transform)

    def get_lower(self, scale=1.0, transform=None):
        u"""Intrados transforme (defaut : :func:`scale_transform`)."""
        return self._view(self._lower, scale, transform or scale_transform)

    def get_leading_edge_band(self, scale=1.0, transform=None):
        return self._view(self._leading_edge, scale,
                          transform or scale_transform)

    def get_centerline(self, scale=1.0, transform=None):
        u"""Ligne moyenne transformee (defaut : :func:`scale_transform`)."""
        return self._view(self._centerline, scale,
                          transform or scale_transform)

    def get_all_points(self, sampled=False):
        u"""Nuage de points complet.

        :param sampled: sous-echantillonnage a pas fixe (SAMPLE_STRIDE)
            pour un apercu rapide ; un petit nuage peut se reduire a un
            seul point
        :type sampled: bool
        :returns: ndarray(n, 2)
        """
        if sampled:
            return self._points[::SAMPLE_STRIDE].copy()
        return self._points.copy()

    # ------------------------------------------------------------------
    #  Proprietes geometriques derivees
    # ------------------------------------------------------------------

    def max_thickness(self):
        u"""Position et valeur de l'epaisseur maximale (2.yt).

        :returns: (x, epaisseur) en unites de corde
        :rtype: tuple
        """
        c = self.chord
        t = self._params.thickness
        if t == 0.0:
            return 0.0, 0.0
        close = self._close_airfoils
        res = minimize_scalar(
            lambda x: -2.0 * float(half_thickness(x, c, t, close)),
            bounds=(0.0, c), method='bounded')
        return float(res.x), float(-res.fun)

    def max_camber(self):
        u"""Position et valeur de la cambrure maximale de la ligne moyenne.

        :returns: (x, cambrure) en unites de corde
        :rtype: tuple
        """
        prm = self._params
        if prm.is_symmetric:
            return 0.0, 0.0
        c = prm.chord

        def objective(x):
            y = float(camber_y(x, c, prm.max_camber, prm.camber_position))
            return -y if np.isfinite(y) else np.inf

        res = minimize_scalar(objective, bounds=(0.0, c), method='bounded')
        return float(res.x), float(-res.fun)

    # ------------------------------------------------------------------
    #  Ecriture
    # ------------------------------------------------------------------

    def dump(self, stream, fmt='selig', cloud=False):
        u"""Ecrit les coordonnees dans un flux texte ouvert.

        Convention Selig : BF -> extrados -> BA -> intrados -> BF.

        :param stream: flux texte (fichier ouvert, sys.stdout, ...)
        :param fmt: format ('selig' ou 'csv')
        :type fmt: str
        :param cloud: ecrire le nuage complet (:attr:`points`) au lieu du
            contour extrados + intrados
        :type cloud: bool
        """
        writers = {
            'selig': self._write_selig,
            'csv': self._write_csv,
        }
        if fmt not in writers:
            raise ValueError(
                u"Format d'ecriture inconnu '%s'. Attendu : %s"
                % (fmt, ', '.join(sorted(writers.keys()))))
        writers[fmt](stream, self._points if cloud else self._outline)

    def write(self, filepath, fmt='selig', cloud=False):
        u"""Ecrit le profil dans un fichier.

        :param filepath: chemin de sortie
        :type filepath: str
        :param fmt: format ('selig' ou 'csv')
        :type fmt: str
        :param cloud: voir :meth:`dump`
        :type cloud: bool
        :returns: chemin du fichier ecrit
        :rtype: str
        """
        filepath = str(filepath)
        if fmt not in FORMATS:
            raise ValueError(u"Format d'ecriture inconnu '%s'" % fmt)
        with open(filepath, 'w') as f:
            self.dump(f, fmt, cloud)
        logger.info(u"Profil '%s' ecrit dans %s (format %s)",
                    self.name, filepath, fmt)
        return filepath

    def _write_selig(self, f, points):
        f.write('%s\n' % self.name)
        for x, y in points:
            f.write(' %12.8f %12.8f\n' % (x, y))

    def _write_csv(self, f, points):
        f.write('x;y\n')
        for x, y in points:
            f.write('%.8f;%.8f\n' % (x, y))

    # ------------------------------------------------------------------
    #  Trace
    # ------------------------------------------------------------------

    def plot(self, ax=None, show=True):
        u"""Trace le profil : extrados, intrados, ligne moyenne.

        :param ax: axes matplotlib existants (None = creation)
        :param show: appeler plt.show() a la fin
        :type show: bool
        :returns: axes matplotlib
        """
        import matplotlib.pyplot as plt

        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(10, 3))

        if self._convex_hull:
            ax.plot(self._points[:, 0], self._points[:, 1], '.',
                    color='0.7', markersize=1, label='nuage')
        ax.plot(self._upper[:, 0], self._upper[:, 1], 'r-',
                linewidth=1.2, label='extrados')
        ax.plot(self._lower[:, 0], self._lower[:, 1], 'b-',
                linewidth=1.2, label='intrados')
        ax.plot(self._centerline[:, 0], self._centerline[:, 1], 'k--',
                linewidth=0.8, label='ligne moyenne')
        if len(self._leading_edge):
            ax.plot(self._leading_edge[:, 0], self._leading_edge[:, 1],
                    'g.', markersize=3, label='bord d\'attaque')
        ax.set_aspect('equal')
        ax.set_title(self.name)
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=8)

        if show:
            plt.show()

        return ax
