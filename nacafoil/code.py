#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Lecture des designations NACA 4 et 5 chiffres.

Decompose une designation en parametres geometriques::

    >>> params = parse_code('2412')
    >>> params.max_camber, params.camber_position, params.thickness
    (0.02, 0.4, 0.12)

Serie 4 chiffres ``ABCD`` :
    m = A/100, p = B/10, t = CD/100

Serie 5 chiffres ``ABCDE`` :
    m = A*0.02, p = BC*0.05, t = DE/100

La serie 5 chiffres utilise toujours la ligne moyenne non reflexe, avec
ces echelles lineaires. La ligne moyenne reflexe n'est pas implementee.

@author: Nervures
@date: 2026-10
"""

import math
import logging
from collections import namedtuple

from .errors import InvalidCodeError

logger = logging.getLogger(__name__)

FOUR_DIGIT = 'four-digit'
FIVE_DIGIT = 'five-digit'

_DIGITS = '0123456789'


class AirfoilParameters(namedtuple(
        'AirfoilParameters',
        ['code', 'thickness', 'max_camber', 'camber_position', 'chord',
         'variant'])):
    u"""Parametres d'un profil NACA, immuables.

    - code : designation d'origine (str)
    - thickness : epaisseur relative t (fraction de corde)
    - max_camber : cambrure maximale m (fraction de corde)
    - camber_position : position de la cambrure maximale p
    - chord : corde c (> 0)
    - variant : FOUR_DIGIT ou FIVE_DIGIT
    """
    __slots__ = ()

    @property
    def is_five_digit(self):
        return self.variant == FIVE_DIGIT

    @property
    def is_symmetric(self):
        u"""True si la ligne moyenne est confondue avec la corde (m = 0)."""
        return self.max_camber == 0.0


def _check_chord(chord):
    c = float(chord)
    if not math.isfinite(c) or c <= 0.0:
        raise ValueError(u"La corde doit etre > 0, recu %r" % (chord,))
    return c


def parse_code(code, chord=1.0):
    u"""Decompose une designation NACA en parametres geometriques.

    :param code: designation NACA, 4 ou 5 chiffres (ex: '2412', '23012')
    :type code: str
    :param chord: longueur de corde
    :type chord: float
    :returns: parametres du profil
    :rtype: AirfoilParameters
    :raises InvalidCodeError: designation non numerique ou de mauvaise longueur
    :raises ValueError: corde negative, nulle ou non finie
    """
    raw = code
    code = str(code).strip()
    if not code or any(ch not in _DIGITS for ch in code):
        raise InvalidCodeError(raw, u"chiffres ASCII attendus")

    c = _check_chord(chord)
    digits = [int(ch) for ch in code]

    if len(code) == 4:
        m = digits[0] / 100.0
        p = digits[1] / 10.0
        t = int(code[2:4]) / 100.0
        variant = FOUR_DIGIT
    elif len(code) == 5:
        m = digits[0] * 0.02
        p = int(code[1:3]) * 0.05
        t = int(code[3:5]) / 100.0
        variant = FIVE_DIGIT
        if p >= 1.0:
            logger.warning(
                u"NACA %s : position de cambrure p=%.2f hors de la corde, "
                u"branche avant seule", code, p)
    else:
        raise InvalidCodeError(
            raw, u"4 ou 5 chiffres attendus, recu %d" % len(code))

    params = AirfoilParameters(code, t, m, p, c, variant)
    logger.debug(u"NACA %s : t=%.4f m=%.4f p=%.4f c=%g (%s)",
                 code, t, m, p, c, variant)
    return params
