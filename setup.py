from setuptools import setup, find_packages

setup(
    name="randgraph",
    version="0.1.0",
    description="Weighted random numbers by rejection sampling, with a live histogram",
    author="adamfilli",
    packages=find_packages(include=["randgraph", "randgraph.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
        "screeninfo",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["randgraph=randgraph.__main__:main"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
