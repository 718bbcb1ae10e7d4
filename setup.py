from setuptools import find_packages, setup

setup(
    name="linediff",
    version="0.1.0",
    description="Line-based unified diff previews for source transformations",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
)
