from setuptools import setup, find_packages

# Read version from package
version = {}
with open("src/simple_interaction/__init__.py") as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, version)
            break

setup(
    name="simple_interaction",
    version=version.get("__version__", "0.0.0"),
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "simple-interaction=simple_interaction.cli:main",
        ],
    },
)
