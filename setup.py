""" ethhd build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ethhd

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ethhd.name,
    version=ethhd.__version__,
    license=ethhd.__license__,
    author=ethhd.__author__,
    author_email=ethhd.__author_email__,
    description="BIP32/BIP44 hierarchical deterministic keys for Ethereum",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["coincurve", "pycryptodome"],
    extras_require={"test": ["pytest"]},
    keywords=("ethereum bitcoin cryptography secp256k1 bip32 bip44 hd-wallet eip55"),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
