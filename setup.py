from setuptools import setup

setup(
    name="bookgen",
    version="0.1.0",
    description="Synthetic book fixture generator and analyser",
    author="The Delta Lake Project Authors",
    python_requires=">= 3.8",
    packages=["bookgen"],
    install_requires=["numpy", "pandas", "fsspec"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "bookgen-generate=bookgen.cli:generate_main",
            "bookgen-analyse=bookgen.cli:analyse_main",
        ]
    },
    zip_safe=False,
    package_data={},
    include_package_data=True,
)
