from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="orderedunionfind",
    version="0.1.0",
    description="Disjoint-set structure with insertion-ordered, stable representatives",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
