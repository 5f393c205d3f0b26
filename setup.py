""" cmsig build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import cmsig

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=cmsig.name,
    version=cmsig.__version__,
    license=cmsig.__license__,
    author=cmsig.__author__,
    author_email=cmsig.__author_email__,
    description="Prime order elliptic curves by complex multiplication "
    "and ElGamal signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json", "sympy"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves complex-multiplication "
        "cornacchia elgamal digital-signature"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
