[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acidvoice"
version = "0.1.0"
description = "Building blocks for a monophonic acid bass voice: one-pole filters, envelopes, band-limited wavetables and a four-pole ladder filter."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["dsp", "synthesizer", "audio", "filter", "wavetable", "bass"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["acidvoice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
