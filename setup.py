from pathlib import Path
import re

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    init = (HERE / "src" / "percentq" / "__init__.py").read_text(encoding="utf-8")
    m = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", init, re.M)
    if not m:
        raise RuntimeError("__version__ not found in src/percentq/__init__.py")
    return m.group(1)


setup(
    name="percentq",
    version=_read_version(),
    description="Percent-literal style templates: raw/interpolated strings and word lists",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["percentq=percentq.cli:main"]},
)
