from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="flowcut",
    version="0.1.0",
    description="Maximum flow and minimum cut on dense capacity matrices.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"flowcut.schemas": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["numpy", "networkx", "pyyaml", "jsonschema"],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["flowcut=flowcut.cli:main"]},
)
