'''
Created: Monday, 19th October 2026 09:05:12 am
Last Modified: Monday, 19th October 2026 05:02:44 pm

Setup.py file that governs the installation process of `ttshells`.
Install with ``pip install -e .``, the test dependencies with
``pip install -e .[tests]``. Run the tests with ``pytest``.
'''
from setuptools import setup, find_packages


setup(
    name='ttshells',
    version='0.1.0',
    description=(
        'Named Earth model shells and discontinuities for travel-time '
        'table construction'),
    license='EUPL-1.2',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'obspy',
    ],
    extras_require={
        'tests': ['pytest'],
    },
)
