#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pywellgrad',
    include_package_data=True,
    version='0.1.0',
    packages=find_packages(),
    description='pyWellGrad - Stepwise pressure traverse of vertical well tubing',
    long_description=long_description,
    long_description_content_type='text/markdown',
    keywords=['well', 'petroleum', 'pressure traverse', 'vlp'],
    classifiers=[],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'pandas',
        'setuptools'
    ],
    extras_require={
        'test': ['pytest'],
    }
)
