#! /usr/bin/env python3

from setuptools import setup

setup(name='sudokuviz',
      version='1.0',
      author='sudokuviz contributors',
      description='Backtracking sudoku solver with step observation',
      packages=['sudokuviz'],
      py_modules=['watch'],
      python_requires='>=3.8',
      install_requires=['gmpy2'],
      extras_require={'test': ['pytest']})
