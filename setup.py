#!/usr/bin/env python3
# coding: utf-8
"""wikigrams — word n-gram counts for Wikipedia dumps
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='wikigrams',
    version='0.2.0',
    description='Context extraction and word n-gram counts for Wikipedia dumps',
    long_description=long_description,
    long_description_content_type='text/markdown',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Text Processing :: Linguistic',
        'Natural Language :: English',
        'License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.6',
    keywords='nlp ngrams corpus wikipedia',

    packages=find_packages(exclude=['contrib', 'docs', 'tests']),

    install_requires=[
        'funcparserlib',
    ],
    extras_require={
        'dev': ['check-manifest'],
        'test': ['pytest', 'coverage'],
    },

    entry_points={
        'console_scripts': [
            'ngramcount=wikigrams.ngramcount:main',
        ],
    },
)
