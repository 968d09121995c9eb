"""Read PCM WAV files, plot their magnitude spectrum, and turn hex sample dumps into WAV files."""

__version__ = "0.1.0"