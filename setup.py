from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='ascension',
    version='1.0.0',
    packages=find_packages(include=['ascension', 'ascension.*']),
    license='GPLv3',
    description='Right ascension conversions between time and angle',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['astronomy', 'right ascension', 'coordinates'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Astronomy',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
    python_requires='>=3.8',
    install_requires=[],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage'], 'test': ['pytest']},
)
