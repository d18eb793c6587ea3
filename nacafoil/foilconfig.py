#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Parametres de construction des profils (fichier defaults_geometry.cfg).

Format : CLE=valeur, une par ligne, # pour les commentaires. Les valeurs
sont typees a la lecture (bool, int, float, str) ; les valeurs passees
en texte par l'utilisateur sont typees de la meme facon.

Seules les cles de GEOMETRY_KEYS sont retenues, converties en arguments
nommes de :class:`AirfoilGeometry`. Le coeur geometrique ne lit jamais
la configuration de lui-meme (voir :meth:`AirfoilGeometry.from_config`).

@author: Nervures
@date: 2026-10
"""

import os
import logging

logger = logging.getLogger(__name__)

DEFAULTS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                             'defaults_geometry.cfg')


def _to_bool(value):
    if isinstance(value, (bool, int, float)):
        return bool(value)
    raise ValueError(u"Valeur booleenne attendue, recu %r" % (value,))


# Cle de configuration -> (argument de AirfoilGeometry, conversion)
GEOMETRY_KEYS = {
    'CHORD': ('chord', float),
    'RESOLUTION': ('resolution', float),
    'CLOSE_AIRFOILS': ('close_airfoils', _to_bool),
    'CONVEX_HULL': ('convex_hull', _to_bool),
    'LEADING_EDGE': ('leading_edge', _to_bool),
}


def parse_value(text):
    u"""Type une valeur texte : bool, int, float, sinon chaine sans quotes."""
    s = text.strip()
    if s.lower() in ('true', 'yes', 'on'):
        return True
    if s.lower() in ('false', 'no', 'off'):
        return False
    for convert in (int, float):
        try:
            return convert(s)
        except ValueError:
            pass
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ('"', "'"):
        return s[1:-1]
    return s


def read_config(filepath):
    u"""Lit un fichier CLE=valeur.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: parametres types, cles en majuscules
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    """
    if not os.path.isfile(filepath):
        raise IOError(u"Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, value = line.split('=', 1)
            params[key.strip().upper()] = parse_value(value)
    logger.debug(u"Configuration %s : %d parametres", filepath, len(params))
    return params


def geometry_kwargs(params):
    u"""Convertit des parametres CLE=valeur en arguments de construction.

    Les cles sont insensibles a la casse, les valeurs texte sont typees
    par :func:`parse_value` ('false' -> False), les cles inconnues sont
    ignorees.

    :param params: parametres
    :type params: dict
    :returns: arguments nommes pour AirfoilGeometry
    :rtype: dict
    """
    kwargs = {}
    for key, value in params.items():
        key = str(key).strip().upper()
        if key not in GEOMETRY_KEYS:
            logger.debug(u"Parametre ignore : %s", key)
            continue
        name, convert = GEOMETRY_KEYS[key]
        if isinstance(value, str):
            value = parse_value(value)
        kwargs[name] = convert(value)
    return kwargs


def geometry_defaults(user_params=None, filepath=DEFAULTS_FILE):
    u"""Arguments de construction : defauts du fichier, surcharges par
    les parametres utilisateur.

    :param user_params: parametres utilisateur (CHORD, RESOLUTION, ...)
    :type user_params: dict or None
    :param filepath: fichier de defauts
    :type filepath: str
    :returns: arguments nommes pour AirfoilGeometry
    :rtype: dict
    """
    kwargs = geometry_kwargs(read_config(filepath))
    if user_params:
        kwargs.update(geometry_kwargs(user_params))
    return kwargs
