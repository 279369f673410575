from setuptools import setup, find_packages

setup(
    name="matrixsteps",
    version="0.1",
    description="Exact rational linear algebra with step-by-step traces",
    long_description=("Gauss-Jordan reduction, determinants, characteristic polynomials, eigenbases, fundamental "
                      "subspaces and diagonalization over exact rationals, recording every elimination and "
                      "expansion step for display"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["matrixsteps", "matrixsteps.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Education", "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9", "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "rational arithmetic", "row reduction", "eigenvectors", "education"],
    zip_safe=False,
)
