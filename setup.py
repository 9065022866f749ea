#!/usr/bin/env python3
from setuptools import setup, find_packages


setup(
    name='pkgsetup',
    version='1.0.0a1',
    author='The pkgsetup Authors',
    description='Packaging files for generated Python binding packages',
    long_description=open('README.rst').read(),
    license='BSD',
    packages=find_packages('.'),
    install_requires=[
        'click>=7.0',
        'termcolor>=1.1.0',
        'packaging>=20.0',
    ],
    extras_require={
        'test': [
            'green>=3.0',
            'coverage>=5.0',
        ],
    },
    entry_points='''
        [console_scripts]
        pkgsetup=pkgsetup.main:cli
    ''',
)
