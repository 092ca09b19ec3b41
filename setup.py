# setup.py
from setuptools import setup, find_packages

setup(
    name="libv",
    version="1.0.0",
    description="Fixed-size N-dimensional and 3D vectors on NumPy",
    packages=find_packages(include=["libv", "libv.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
