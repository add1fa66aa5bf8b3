"""
Installation setup for boosterodds
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("boosterodds/resources/boosterodds.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))

setuptools.setup(
    name="boosterodds",
    version=config.get("Boosterodds", "version", fallback="1.0.0+fallback"),
    description="Scryfall bulk data to set statistics and booster pull probabilities",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python",
        "Topic :: Games/Entertainment",
    ],
    keywords=[
        "Booster",
        "Card Games",
        "Collectible",
        "JSON",
        "MTG",
        "Probability",
        "Scryfall",
        "Trading Cards",
        "Magic: The Gathering",
    ],
    include_package_data=True,
    packages=setuptools.find_packages(include=["boosterodds", "boosterodds.*"]),
    package_data={"boosterodds": ["resources/*.properties"]},
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={
        "test": project_root.joinpath("requirements_test.txt")
        .open(encoding="utf-8")
        .readlines()
        if project_root.joinpath("requirements_test.txt").is_file()
        else ["pytest"],
    },
    entry_points={"console_scripts": ["boosterodds=boosterodds.__main__:main"]},
)
