import os

from setuptools import find_packages, setup

setup(
    name="oxido",
    version="0.1.0",
    packages=find_packages(include=["oxido", "oxido.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
        "pydantic-core",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Oxido Contributors",
    description="Option/Result containers and a fail-fast schema validation engine",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
