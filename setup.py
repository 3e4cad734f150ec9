#!/usr/bin/env python

from setuptools import setup, find_packages

import dualmap

setup(name='dualmap',
      version=dualmap.__version__,
      author='Mauricio Santecchia',
      url='https://github.com/mailcmd/dual_map_ex',
      license='MIT',
      description='A simple dual-entry map',
      long_description=open('README.rst').read(),
      classifiers=[
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: 3.13',
          'Topic :: Software Development :: Libraries :: Python Modules',
      ],
      packages=find_packages(exclude=['tests', 'example']),
      keywords=['bidirectional', 'map', 'dictionary', 'bimap'],
      zip_safe=True,
      include_package_data=True,
      extras_require={
          'examples': ['netaddr'],
          'test': ['pytest'],
      },
      )
