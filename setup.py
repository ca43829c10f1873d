"""CommentConfig"""

from pathlib import Path

from setuptools import setup, find_packages

requirements = Path("requirements.txt").read_text().strip().split("\n")

setup(
    name="CommentConfig",
    version="0.1.dev0",
    description="Parse configuration directives written in source code comments.",
    packages=find_packages(exclude=["doc", "tests", "tmp"]),
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
)
