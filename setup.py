from setuptools import setup, find_packages

setup(
    name="polyfit",
    version="1.0",
    description="polyfit: weighted least squares polynomial fitting",
    author="marcu",
    packages=find_packages(exclude=["tests"]),
    install_requires=["numpy", "scipy", "polars", "tqdm"],
    extras_require={"test": ["pytest"]},
)
