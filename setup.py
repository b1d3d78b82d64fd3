from setuptools import setup, find_packages
import re

# Read version from payroster/__init__.py
with open('payroster/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='pay-roster',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'payroster': ['data/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'pay-roster=payroster.cli.__main__:main',
        ],
    },
    author='Personal',
    description='Employee pay records with ordering and lookup.',
    python_requires='>=3.10',
)
