import os
import pathlib

from setuptools import find_packages, setup

here = pathlib.Path(os.path.dirname(os.path.abspath(__file__)))

with open(str(here / "README.rst"), "r") as f:
    readme = f.read()

setup(
    name="devoverride",
    version="1.0.0",
    description="Mock dependencies during development, without restarting.",
    long_description=readme,
    long_description_content_type="text/x-rst",
    packages=find_packages("src"),
    package_dir={"": "src"},
    package_data={"devoverride": ["py.typed"]},
    python_requires=">=3.7,<4",
    install_requires=["typing_extensions"],
    extras_require={"test": ["pytest"]},
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
    keywords="dependency injection mock debug",
    zip_safe=False,
)
