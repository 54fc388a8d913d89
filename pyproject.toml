[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xbst"
version = "0.1.2"
description = "Build an original Xbox soundtrack database (ST.DB) and WMA files from a folder of music"
requires-python = ">=3.10"
dependencies = [
    "unidecode",
]
keywords = ["xbox", "soundtrack", "st.db", "wma", "ffmpeg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xbst = "xbst.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xbst"]

[tool.pytest.ini_options]
addopts = "-ra"
