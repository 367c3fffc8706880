import os

from setuptools import find_packages, setup


# read the version from the VERSION file
def get_version():
    with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
        return version_file.read().strip()


# Set the version in the stacktail/version.py file
def set_version_constant(version: str):
    with open(os.path.join(os.path.dirname(__file__), "stacktail", "version.py"), "w") as version_file:
        version_file.write(f'__version__ = "{version}"\n')


version = get_version()
set_version_constant(version)

setup(
    name="stacktail",
    version=version,
    description="Tail the events of an AWS CloudFormation stack in your terminal",
    python_requires=">=3.8",
    packages=find_packages(include=["stacktail", "stacktail.*"]),
    install_requires=[
        "boto3>=1.26",
        "botocore>=1.29",
        "click>=8.0",
        "rich>=12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tail-stack-events=stacktail.cli.main:main",
        ],
    },
)
