#!/usr/bin/env python3

import os
from setuptools import setup, find_packages


# Read the README file
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='seqdupes',
    version='0.1.0',
    description='Collapse duplicate FASTA/FASTQ records and report the merged headers as JSON',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Steven Weaver',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='bioinformatics fasta fastq deduplication sequence-analysis',

    # Packages and package data
    packages=find_packages(),
    python_requires='>=3.8',

    # Dependencies
    install_requires=[
        'biopython',
        'colored-traceback',
    ],

    # Entry points
    entry_points={
        'console_scripts': [
            'seqdupes=seqdupes.scripts.seqdupes:main',
        ],
    },

    # Include data files
    include_package_data=True,
    package_data={
        'seqdupes.test': ['data/*'],
    },

    test_suite='seqdupes.test.suite',
)
