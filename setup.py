from setuptools import find_packages, setup

setup(
    name="mdimports",
    version="1.0.0",
    description="Recursive @file, @url and !`command` expansion for markdown documents",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["mdimports", "mdimports.*"]),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["mdimports=mdimports.cli:main"]},
)
