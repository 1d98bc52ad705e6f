from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

_CURVE_MODULES = ("gf25519", "ec25519", "scalar25519")

cythonized_extensions = cythonize(
    [
        Extension(
            f"ueccfixtures.curves.{name}",
            [f"src/ueccfixtures/curves/{name}.py"],
            extra_compile_args=[
                "-O3",
                "-Wno-unused-function",
                "-Wno-unused-variable",
            ],
            language="c",
        )
        for name in _CURVE_MODULES
    ],
    compiler_directives={
        "language_level": 3,
        "boundscheck": False,
        "wraparound": False,
        "cdivision": True,
        "infer_types": True,
        "nonecheck": False,
        "initializedcheck": False,
        "annotation_typing": False,
    },
    build_dir="build/cython",
)

if __name__ == "__main__":
    setup(
        name="uecc-fixtures",
        version="0.1.0",
        description="Byte-exact conformance fixtures for libuecc Curve25519 arithmetic",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        ext_modules=cythonized_extensions,
        python_requires=">=3.9",
        extras_require={"test": ["pytest>=7"]},
        entry_points={
            "console_scripts": ["uecc-fixtures = ueccfixtures.generate:main"],
        },
    )
