"""
Setup script for pysatl-inference.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-inference",
    version="0.0.1a0",
    description=(
        "Probability distributions and statistical inference: convolution, joint "
        "distributions, information measures, goodness of fit and estimation."
    ),
    author="Leonid Elkin, Mikhail Mikhailov",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=2.0",
        "scipy>=1.13",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
