# type: ignore
import setuptools

MAJOR               = 1
MINOR               = 0
MICRO               = 0
VERSION             = f"{MAJOR}.{MINOR}.{MICRO}"

with open("README.md", "r") as f:
    long_description = f.read()

setuptools.setup(
    name="arffkit",
    version=VERSION,
    description="Read ARFF (Attribute-Relation File Format) data into plain Python objects.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="BSD 3-Clause License",
    packages=["arffkit", "arffkit.context"],
    classifiers=[
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering"
    ],
    install_requires = [
        'requests>=2',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    python_requires=">=3.7",
)
