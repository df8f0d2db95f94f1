import os

from setuptools import find_packages, setup

setup(
    name="utilkit",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    entry_points={
        "console_scripts": [
            "utilkit-demo=utilkit.cli:main",
        ],
    },
    author="Utilkit Contributors",
    description="Small utilities: a result-returning integer parser and a generic container",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
