#!/usr/bin/env python3

from setuptools import setup
from setuptools import find_packages


# Optional dependencies
extras_require = {
    'test': [
        'pytest>=7',
    ],
}

# All dependencies
extras_require['all'] = []
for key in extras_require:
    if key != 'all':
        extras_require['all'] += extras_require[key]

# Setup script
setup(
    name='cmdparams',
    version='0.1.0',
    description='Typed command line parameter processing',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.6',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[x for x in open('requirements.txt').read().splitlines()
                      if x.strip() and not x.startswith('#')],
    extras_require=extras_require,
)
