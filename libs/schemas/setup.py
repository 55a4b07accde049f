from setuptools import setup, find_packages

setup(
    name="dash_schemas",
    version="0.2.0",
    packages=find_packages(),
    install_requires=[
        'pydantic>=2',
    ],
)
