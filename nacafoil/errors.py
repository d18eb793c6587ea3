#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Exceptions du generateur de profils NACA.

- InvalidCodeError : designation NACA illisible (fatal a la construction)
- DomainViolation : station hors de la corde [0, c] (recuperee par le
  sampler, qui ramene la station dans la corde)
- DegenerateSampleError : echantillon non fini (NaN/inf), ecarte de la
  surface par le sampler

@author: Nervures
@date: 2026-10
"""


class NacaFoilError(Exception):
    u"""Classe de base des erreurs du package."""


class InvalidCodeError(NacaFoilError, ValueError):
    u"""Designation NACA non numerique ou de longueur differente de 4 ou 5."""

    def __init__(self, code, reason=None):
        self.code = code
        msg = u"Designation NACA invalide : '%s'" % (code,)
        if reason:
            msg = u"%s (%s)" % (msg, reason)
        super(InvalidCodeError, self).__init__(msg)


class DomainViolation(NacaFoilError, ValueError):
    u"""Station x hors de [0, c] : la racine de x/c n'est pas definie."""


class DegenerateSampleError(NacaFoilError, ArithmeticError):
    u"""Echantillon dont une coordonnee est NaN ou infinie."""
