from setuptools import find_namespace_packages, setup


setup(
    name="shargparse",
    version="0.3.0",
    description="Generador de parsers de argumentos POSIX sh a partir de directivas en comentarios",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["shargparse", "shargparse.*"]),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["shargparse = shargparse.cli:main"]},
)
