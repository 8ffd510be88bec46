import setuptools
from setuptools import setup

## README
with open("README.md", "r") as fh:
    long_description = fh.read()

## Requirements
with open("requirements.txt", "r") as r:
    requirements = [i.strip() for i in r.readlines() if i.strip()]

## Run Setup
setup(
    name="preztweet",
    version="0.0.1",
    description="Count and TF-IDF Features for Pre- vs. Post-Presidency Tweet Classification",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("./", exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={"test":["pytest"]},
)
