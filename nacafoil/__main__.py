#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Generation des coordonnees d'un profil NACA en ligne de commande.

Usage::

    python -m nacafoil 2412
    python -m nacafoil 0012 --chord 200 --resolution 0.5 -o naca0012.dat
    python -m nacafoil 23012 --format csv --open --plot

@author: Nervures
@date: 2026-10
"""

import sys
import argparse
import logging

from .foilconfig import geometry_defaults
from .geometry import FORMATS, AirfoilGeometry


def build_parser(defaults=None):
    u"""Parseur de la ligne de commande.

    :param defaults: arguments de construction par defaut (voir
        :func:`foilconfig.geometry_defaults`) ; None = defaults_geometry.cfg
    :type defaults: dict or None
    """
    if defaults is None:
        defaults = geometry_defaults()
    parser = argparse.ArgumentParser(
        prog='nacafoil',
        description=u"Coordonnees d'un profil NACA 4 ou 5 chiffres")
    parser.add_argument('code', help=u"designation NACA (ex: 2412, 23012)")
    parser.add_argument('--chord', type=float, default=defaults['chord'],
                        help=u"longueur de corde (defaut : %(default)s)")
    parser.add_argument('--resolution', type=float,
                        default=defaults['resolution'],
                        help=u"pas le long de la corde (defaut : %(default)s)")
    parser.add_argument('--open', dest='close_airfoils',
                        action='store_false',
                        help=u"bord de fuite legerement ouvert")
    parser.add_argument('--closed', dest='close_airfoils',
                        action='store_true', help=u"bord de fuite ferme")
    parser.add_argument('--hull', dest='convex_hull', action='store_true',
                        help=u"nuage plein : enveloppe convexe + remplissage")
    parser.add_argument('--no-hull', dest='convex_hull',
                        action='store_false', help=u"contour seul")
    parser.add_argument('--no-leading-edge', dest='leading_edge',
                        action='store_false',
                        help=u"sans bande de bord d'attaque")
    parser.add_argument('--format', choices=FORMATS,
                        default='selig', help=u"format de sortie")
    parser.add_argument('-o', '--output', default=None,
                        help=u"fichier de sortie (defaut : sortie standard)")
    parser.add_argument('--plot', action='store_true',
                        help=u"afficher le profil (matplotlib)")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help=u"messages de debug")
    # Options a double sens : defauts de defaults_geometry.cfg
    parser.set_defaults(close_airfoils=defaults['close_airfoils'],
                        convex_hull=defaults['convex_hull'],
                        leading_edge=defaults['leading_edge'])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)-20s %(levelname)-8s %(message)s'
    )

    try:
        geometry = AirfoilGeometry(args.code, chord=args.chord,
                                   resolution=args.resolution,
                                   close_airfoils=args.close_airfoils,
                                   convex_hull=args.convex_hull,
                                   leading_edge=args.leading_edge)
    except ValueError as e:
        # InvalidCodeError compris
        sys.stderr.write(u"nacafoil: %s\n" % e)
        return 2

    if args.output:
        geometry.write(args.output, fmt=args.format, cloud=args.convex_hull)
    else:
        geometry.dump(sys.stdout, fmt=args.format, cloud=args.convex_hull)

    if args.plot:
        geometry.plot()
    return 0


if __name__ == '__main__':
    sys.exit(main())
