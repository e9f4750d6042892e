#!/usr/bin/env python

from io import StringIO

from setuptools import find_packages, setup

import ipvalidator


def long_description():
    buf = StringIO()
    with open('README.md') as fh:
        for line in fh:
            # the development section is for contributors
            if line == '### Development\n':
                break
            buf.write(line)
    return buf.getvalue()


tests_require = ('pytest>=6.2.5', 'pytest-cov>=3.0.0')

setup(
    description=ipvalidator.__doc__,
    extras_require={
        'dev': tests_require
        + (
            'black>=23.1.0,<24.0.0',
            'build>=0.7.0',
            'isort>=5.11.5',
            'pyflakes>=2.2.0',
            'readme_renderer[md]>=26.0',
            'twine>=3.4.2',
        )
    },
    install_requires=(
        'jsonschema>=4.0.0',
    ),
    license='MIT',
    long_description=long_description(),
    long_description_content_type='text/markdown',
    name='ipvalidator',
    packages=find_packages(exclude=('tests',)),
    python_requires='>=3.8',
    tests_require=tests_require,
    version=ipvalidator.__version__,
)
