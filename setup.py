#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='nacafoil',
    version='0.1.0',
    description='NACA 4/5-digit airfoil sections - surfaces, camber line, convex hull point cloud',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    packages=['nacafoil'],
    package_data={
        'nacafoil': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
        'scipy>=1.7',
        'matplotlib>=3.5',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    python_requires='>=3.8',
)
