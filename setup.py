from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("slidefactory", "./src/slidefactory/__init__.py")
slidefactory = ModuleType(loader.name)
loader.exec_module(slidefactory)

setup(
    name="slidefactory",
    version=slidefactory.__version__,  # type: ignore
    description="Turn plain-text outlines into slide decks and videos.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests"]),
    package_data={"slidefactory": ["templates/*.j2", "themes/*.css"]},
    entry_points={"console_scripts": ["slidefactory=slidefactory.cli:main"]},
    install_requires=[
        "appdirs",
        "click",
        "cyclopts",
        "fastapi>=0.116",
        "Jinja2",
        "playwright",
        "pydantic>=2.10",
        "PyYAML",
        "rich",
        "uvicorn",
        "watchfiles",
    ],
    extras_require={"test": ["httpx", "pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
    ],
)
