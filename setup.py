import re
from pathlib import Path

from setuptools import find_packages, setup

init = (Path(__file__).parent / "strcrypt" / "__init__.py").read_text()
version = re.search(r'^__version__ = "([^"]+)"', init, re.M).group(1)

setup(
    name="strcrypt",
    version=version,
    description="Secure random strings, base-36 identifiers, numeral conversion and AES-CBC string helpers",
    packages=find_packages(include=["strcrypt", "strcrypt.*"]),
    python_requires=">=3.10",
    install_requires=[
        "cryptography>=41",
        "numpy>=1.24",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
