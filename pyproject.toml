[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tihutext"
version = "0.1.0"
description = "Text front end for Persian speech synthesis: word and corpus model, number and punctuation pronunciation, hzip data files and an external grapheme-to-phoneme driver."
requires-python = ">=3.10"
dependencies = []
keywords = ["persian", "farsi", "phonetics", "text-to-speech", "g2p", "mbrola", "hzip"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Persian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tihutext"]

[tool.pytest.ini_options]
addopts = "-ra"
