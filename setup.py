import re
import os
import codecs

from setuptools import setup, find_packages


here = os.path.abspath(os.path.dirname(__file__))


def find_version(*parts):
    with codecs.open(os.path.join(here, *parts), 'r', 'latin1') as f:
        version_file = f.read()

    # The version line must have the form
    # __version__ = 'ver'
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


def read(*parts):
    with codecs.open(os.path.join(here, *parts), encoding='utf-8') as f:
        return f.read()


setup(
    name = 'matlabfmt',
    version = find_version('matlabfmt', '__init__.py'),
    license = 'MIT',
    description = 'A source code formatter for MATLAB.',
    long_description = read('README.rst'),
    packages = find_packages(exclude=['*tests*']),
    test_suite = "matlabfmt.tests",
    install_requires = [
        'appdirs',
        'pyyaml'
    ],
    python_requires = '>=3.5',
    platforms = 'any',
    classifiers = [
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Natural Language :: English',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Topic :: Software Development :: Quality Assurance'
    ],
    entry_points = {
        'console_scripts': [
            'matlabfmt=matlabfmt:main'
        ]
    }
)
