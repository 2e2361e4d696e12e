from setuptools import find_packages, setup

__version__ = "0.1.0"
VERSION = __version__

setup(
    name="mindset",
    version=VERSION,
    description="Small lessons on LINQ-style collection transformations and SOLID design",
    packages=find_packages(include=["mindset", "mindset.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typing_extensions>=4.4",
        "click>=8.1",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["mindset = mindset.cli:main"],
    },
)
