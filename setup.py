from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqExtra",
    version=version,
    description="Extra functions for immutable indexed sequences (tuples, lists, etc.)",
    long_description=long_description,
    keywords=['sequence', 'immutable', 'functional', 'array', 'persistent'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(include=['seqextra', 'seqextra.*']),
    install_requires=[
        'tblib'],
    extras_require={
        'numpy support': [
            'numpy'],
        'pyrsistent support': [
            'pyrsistent'],
        'documentation': [
            'sphinx'],
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'pyrsistent', 'coverage']
    }
)
