#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'wsdlkit', '__init__.py'),
                                                                     'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC = "A builder for Wsdl 1.1 documents and the Xml Schema types " \
"used in them."

LONG_DESC = """Wsdlkit assembles Wsdl 1.1 documents in memory: messages,
port types, bindings, services and the Xml Schema definitions of the complex
types used in them, with pluggable strategies for turning source types into
schema markup.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='wsdlkit',
    packages=find_packages(),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Markup :: XML',
    ],
    keywords='soap wsdl xml xsd schema',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.10',
    install_requires=[
        'lxml',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },

    entry_points={
        'console_scripts': [
            'sort_wsdl=wsdlkit.util.sort_wsdl:main',
        ]
    },
)
