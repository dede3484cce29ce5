#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re
from setuptools import setup, find_packages


def load_requirements(fname):
    is_comment = re.compile(r'^\s*(#|--).*').match
    with open(fname) as fo:
        return [line.strip() for line in fo if not is_comment(line) and line.strip()]

with open('README.rst', 'rt') as f:
    readme = f.read()

with open('mathfn/__version__.py') as f:
    version_file_contents = f.read()
    ver_dic = {}
    exec(compile(version_file_contents, "mathfn/__version__.py", 'exec'), ver_dic)

requirements = load_requirements('requirements.txt')
requirements_tests = load_requirements('requirements_tests.txt')


info_dict = dict(
    name='mathfn',
    version=ver_dic["VERSION"],
    description='Special mathematical functions for double precision real arguments',
    long_description=readme,
    author='Robbert Harms',
    author_email='robbert@xkls.nl',
    maintainer='Robbert Harms',
    maintainer_email='robbert@xkls.nl',
    packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={'tests': requirements_tests},
    license="LGPL v3",
    zip_safe=False,
    keywords='mathematics, special functions, gamma, beta, incomplete gamma, error function',
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
        'Development Status :: 4 - Beta',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics'
    ],
    test_suite='tests',
    tests_require=requirements_tests
)

setup(**info_dict)
