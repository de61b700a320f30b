from setuptools import setup, find_namespace_packages  # type: ignore


with open("README.md", "r") as f:
    readme = f.read()


setup(
    name="writ",
    version="0.1.0",
    description="Compile literate markdown documents into source files",
    long_description=readme,
    long_description_content_type="text/markdown",
    url="",
    license="",
    python_requires=">=3.8",
    packages=find_namespace_packages(include=("writ", "writ.*")),
    install_requires=["click>=7.0", "markdown-it-py>=2.0"],
    extras_require={"test": ["pytest"]},
    entry_points="""
        [console_scripts]
        writ=writ.writ:writ
    """
)
