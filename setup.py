# setup.py - Package the norm network core
from setuptools import setup, find_packages

setup(
    name="norm-network",
    version="0.1.0",
    description="Generalisation network core and fitness windows for norm synthesis",
    packages=find_packages(include=["norm_network", "norm_network.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
