from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("wandbox", "./src/wandbox/__init__.py")
wandbox = ModuleType(loader.name)
loader.exec_module(wandbox)

setup(
    name="wandbox-client",
    version=wandbox.__version__,  # type: ignore
    description="Client library and command line tool for the Wandbox compiler API.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={"console_scripts": ["wandbox=wandbox.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts>=4",
        "niquests>=3",
        "pydantic>=2",
        "PyYAML",
        "rich",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
