"""Package setup."""

from pathlib import Path

from setuptools import setup, find_packages

import version

long_description = (Path(__file__).parent / 'README.md').read_text()

setup(
    name='mealy',
    version=version.get_version(),
    description="Mealy machines for lexers and protocol decoders.",
    long_description=long_description,
    long_description_content_type="text/markdown",

    keywords=(
        'state machine',
        'mealy',
        'lexer',
    ),
    license='MIT',

    zip_safe=False,

    packages=find_packages(exclude=('test_data', 'test_data.*')),
    include_package_data=True,
    package_data={
        'mealy.config': ['schema.yaml'],
    },

    classifiers=(
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Console',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Software Development :: Libraries',
    ),

    python_requires='>=3.9',

    install_requires=(
        'click',
        'layer-loader',
        'pyyaml >= 5',
        'jsonschema >=3',
    ),

    extras_require={
        'test': (
            'pytest',
            'networkx',
            'pytest-cov',
        ),
    },

    entry_points={
        'console_scripts': (
            'mealy = mealy.cli:main',
        ),
    },
)
