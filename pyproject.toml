[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavspectrum"
version = "0.1.0"
description = "Read PCM WAV files, compute their magnitude spectrum and plot it as a PNG bar chart"
requires-python = ">=3.10"
keywords = ["wav", "fft", "spectrum", "audio", "pcm", "plot", "hex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wavspectrum = "wavspectrum.spectrum:main"
hex-to-wav = "wavspectrum.pcm_hex:main"

[tool.hatch.build.targets.wheel]
packages = ["wavspectrum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
