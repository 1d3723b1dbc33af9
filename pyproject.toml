[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nane"
version = "0.1.0"
description = "NES audio processing unit emulation, a network log server and small emulator utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["nes", "emulator", "apu", "audio", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nane-logserver = "nane.logserver:main"

[tool.hatch.build.targets.wheel]
packages = ["nane"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
