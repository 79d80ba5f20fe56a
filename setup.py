from setuptools import find_packages, setup

setup(
    name="gf25_package",
    version="0.1.0",
    description="Elliptic curve arithmetic over the finite field F_5^2",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    entry_points={"console_scripts": ["gf25=gf25.__main__:main"]},
    extras_require={"test": ["pytest", "sympy"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.12",
)
