[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwdit"
version = "0.1.0"
description = "Morse code (CW) timing estimation, streaming decoding, WAV input and CW audio synthesis"
requires-python = ">=3.10"
dependencies = []
keywords = ["morse", "cw", "ham radio", "decoder", "synthesizer", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cwdit-synth = "cwdit.synth_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cwdit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
