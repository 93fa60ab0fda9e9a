from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent.resolve()
long_description = (here / 'README.md').read_text(encoding='utf-8')

setup(
    name="cmudict-db",
    version="0.1.0",
    description="Convert the CMU Pronouncing Dictionary to an sqlite database and query it",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Natural Language :: English",
    ],
    packages=find_packages(include=["cmudict_db", "cmudict_db.*"]),
    python_requires=">=3.8",
    install_requires=['click', 'pandas', 'pandera', 'schema'],
    extras_require={
        'dev': ['pytest', 'pytest-cov', 'pylint', 'mypy'],
    },
)
