from setuptools import setup, find_packages

setup(
    name="tandemsim",
    version="0.1.0",
    description="Discrete event simulator for tandem networks of finite queues",
    author="adamfilli",
    packages=find_packages(include=["tandemsim", "tandemsim.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tandemsim=tandemsim.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
