import os
from setuptools import setup


VERSION = "0.1.0"


with open(os.path.join("README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='bin2const',
    version=VERSION,
    description='Utility for converting binary files to hex dumps or source code constants.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    license='Public Domain',
    packages=[
        # Core package.
        'bin2const',
    ],
    scripts=[
        # Standalone script mirroring the console entry point.
        'scripts/bin2const.py',
    ],
    entry_points={
        'console_scripts': [
            'bin2const = bin2const.cli:main',
        ],
    },
    install_requires=[
        req for req in open('requirements.txt').read().split('\n') if len(req) > 0
    ],
    package_data={
        # Make sure mypy sees us as typed.
        "bin2const": ["py.typed"],
    },
    python_requires=">=3.7",
)
