from setuptools import setup, find_packages

setup(
    name="ratlinalg",
    version="0.1.0",
    description="Exact rational arithmetic and dense matrix row reduction",
    long_description=("Generic dense matrices over exact fractions (or other number types) with reduced row echelon "
                      "form, determinants, linear independence tests and linear system solving"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["ratlinalg", "ratlinalg.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "rational arithmetic", "gaussian elimination", "rref"],
    zip_safe=False,
)
