import os
from setuptools import setup, find_packages
from pathlib import Path

# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8', errors='ignore').read()

with open(Path("./hantag") / "version", 'r') as df:
    VERSION_NUMBER, RELEASE_DATE, RELEASE_NOTES = df.readlines()[:3]

setup(
    name = "hantag",
    version = VERSION_NUMBER.strip(),
    description = ("Unified Korean morphological and POS tagging over the Hannanum pipeline"),
    packages=find_packages(),
    long_description=read('README.md'),
    entry_points = {
        'console_scripts': ['hantag=hantag.cli.cli:hantag'],
    },
    long_description_content_type='text/markdown',
    install_requires=[
        "pydantic>=2.4",
        "JPype1>=1.5",
        "konlpy>=0.6.0",
        "platformdirs",
        "filelock",
        "rich~=13.6",
        "click~=8.1",
        "rich-click>=1.7.0",
    ],
    extras_require={
        'dev': [
            'pytest',
        ],
    },
    package_data={
        'hantag': ['version', 'resources/*'],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Natural Language :: Korean",
        "Topic :: Text Processing :: Linguistic"
    ]
)
