from setuptools import setup
import runpy

_const = runpy.run_path("argkit/const.py")
VERSION_STR = _const["VERSION_STR"]
DESCRIPTION = _const["DESCRIPTION"]

setup(
    name="argkit",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    author="Cute Engineering",
    author_email="contact@cute.engineering",
    url="https://cute.engineering/",
    packages=["argkit"],
    install_requires=[
        "graphviz",
        "dataclasses-json",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "argkit = argkit:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
