"""
Setup script for the pair picker.
"""

from setuptools import setup, find_packages

setup(
    name="pair-picker",
    version="0.1.0",
    description="Pick a pair of same-typed elements from a CAD host session",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Pair Picker Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
        "rich>=13.0.0",
        "InquirerPy>=0.3.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pair-picker=pair_picker.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
