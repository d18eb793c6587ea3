#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Enveloppe convexe (chaine monotone) et remplissage interieur d'un nuage
de points de profil.

Algorithme :

1. Tri stable des points par x croissant, puis y croissant a x egal
   (doublons exacts : ordre d'insertion)
2. Chaine inferieure : balayage gauche -> droite, on retire le dernier
   point tant que le virage n'est pas strictement a gauche
   (cross <= COLLINEAR_TOL . L^2, L etant la taille du nuage)
3. Chaine superieure : meme balayage, droite -> gauche
4. Remplissage : pour chaque paire de points consecutifs *du tri* (pas de
   l'enveloppe), points interpoles lineairement au pas parametrique 0.01
5. Fermeture : chaque point trie est ajoute aux deux chaines, dont on
   retire ensuite le dernier point (jonction commune)

Resultat : chaine inferieure + chaine superieure + points interieurs.
Le nuage obtenu est volontairement plein (et non une enveloppe vide).
Les points interpoles sur un cote de l'enveloppe sont alignes a
l'arrondi pres : la tolerance les ecarte des chaines, si bien que
l'enveloppe du resultat a les memes sommets que celle du nuage d'entree.

@author: Nervures
@date: 2026-10
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

INTERIOR_STEP = 0.01

# Virage considere comme nul, relatif au carre de la taille du nuage
COLLINEAR_TOL = 1e-12


def cross(o, a, b):
    u"""Produit vectoriel 2D (a - o) x (b - o).

    > 0 : virage a gauche (o, a, b) ; = 0 : points alignes ; < 0 : a droite.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _sorted_points(points):
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    # lexsort est stable : cle principale x, puis y
    order = np.lexsort((pts[:, 1], pts[:, 0]))
    return pts[order]


def _turn_tolerance(points):
    if len(points) == 0:
        return 0.0
    size = float(np.max(points.max(axis=0) - points.min(axis=0)))
    return COLLINEAR_TOL * size * size


def _chain(points, tol=0.0):
    chain = []
    for pt in points:
        while len(chain) >= 2 and cross(chain[-2], chain[-1], pt) <= tol:
            chain.pop()
        chain.append(pt)
    return chain


def monotone_chains(points):
    u"""Chaines inferieure et superieure de l'enveloppe convexe.

    Les points alignes sur un cote de l'enveloppe (a la tolerance
    COLLINEAR_TOL pres) sont exclus des chaines.

    :param points: nuage de points, ndarray(n, 2)
    :type points: numpy.ndarray or list
    :returns: (lower, upper), ndarray(k, 2) chacune ; lower de gauche a
        droite, upper de droite a gauche
    :rtype: tuple
    """
    pts = _sorted_points(points)
    tol = _turn_tolerance(pts)
    lower = _chain(pts, tol)
    upper = _chain(pts[::-1], tol)
    return (np.array(lower).reshape(-1, 2), np.array(upper).reshape(-1, 2))


def interior_points(sorted_points, step=INTERIOR_STEP):
    u"""Points interpoles entre points consecutifs d'un nuage trie.

    Pour chaque paire (a, b) : a + s.(b - a), s = 0, step, 2.step, ... < 1.

    :param sorted_points: points tries, ndarray(n, 2)
    :type sorted_points: numpy.ndarray
    :param step: pas parametrique
    :type step: float
    :returns: points interieurs, ndarray((n-1)*k, 2)
    :rtype: numpy.ndarray
    """
    pts = np.asarray(sorted_points, dtype=float).reshape(-1, 2)
    if len(pts) < 2:
        return np.zeros((0, 2), dtype=float)
    n_steps = int(round(1.0 / step))
    s = np.arange(n_steps, dtype=float) * step
    a = pts[:-1]
    d = pts[1:] - a
    # (n-1, k, 2) : segment par segment, dans l'ordre du tri
    fill = a[:, None, :] + s[None, :, None] * d[:, None, :]
    return fill.reshape(-1, 2)


def build_hull_with_interior(points):
    u"""Enveloppe convexe + remplissage interieur d'un nuage de points.

    :param points: points de contour (extrados + intrados), ndarray(n, 2)
    :type points: numpy.ndarray or list
    :returns: chaine inferieure + chaine superieure + points interieurs,
        ndarray(m, 2)
    :rtype: numpy.ndarray
    """
    pts = _sorted_points(points)
    if len(pts) == 0:
        return np.zeros((0, 2), dtype=float)

    tol = _turn_tolerance(pts)
    lower = _chain(pts, tol)
    upper = _chain(pts[::-1], tol)
    n_lower, n_upper = len(lower), len(upper)

    fill = interior_points(pts)

    # Fermeture du bord d'attaque : tous les points sur les deux chaines
    lower.extend(pts)
    upper.extend(pts)
    lower.pop()
    upper.pop()

    result = np.vstack([np.array(lower), np.array(upper), fill])
    logger.debug(u"Enveloppe : %d + %d sommets, %d points interieurs, "
                 u"%d points au total", n_lower, n_upper, len(fill),
                 len(result))
    return result
