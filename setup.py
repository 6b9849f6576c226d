from setuptools import setup, find_packages

setup(
    name='tabsimplex',
    version='0.1.0',
    description='Two-phase tableau simplex method for linear programs.',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
