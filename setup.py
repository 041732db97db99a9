from setuptools import find_packages, setup

setup(
    name="isoecies",
    version="0.0.0",
    packages=find_packages(include=["isoecies", "isoecies.*"]),
    include_package_data=True,
    install_requires=[
        "cryptography",
        "ecdsa",
        "pydantic",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "isoecies=isoecies.cli:cli",
        ],
    },
)
