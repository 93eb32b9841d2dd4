from setuptools import setup, find_packages

setup(
    name="recipe_md",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A parser and generator for RecipeMD Markdown recipes.",
    url="https://recipemd.org/",
    install_requires=["marko>=2.0"],
    extras_require={"test": ["pytest"]},
)
