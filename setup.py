"""Skilling setup"""
from setuptools import setup, find_packages

setup(
    name='skilling',
    version='0.1.0',
    description="Hilbert curve indexing with Skilling's transpose algorithm",
    author='aharttn',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'numpy>=1.24',
        'tqdm>=4.65',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'skilling=skilling.cli.__main__:main',
        ],
    },
    python_requires='>=3.8',
)
