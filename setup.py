"""Set-up file for poreprops for installations using ``pip install .``"""
from setuptools import find_packages, setup


with open("requirements.txt") as f:
    required = f.read().splitlines()


setup(
    name="poreprops",
    version="0.1.0",
    license="GPL",
    keywords=["porous media multiphase flow material properties automatic differentiation"],
    install_requires=required,
    extras_require={"testing": ["pytest>=7"]},
    description="Fluid and fluid-matrix correlations for porous media with forward-mode AD",
    platforms=["Linux", "Windows", "Mac OS-X"],
    package_data={"poreprops": ["py.typed"]},
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    zip_safe=False,
)
