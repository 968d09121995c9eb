# wavspectrum

Tools for looking at the frequency content of PCM WAV recordings.

- `wavspectrum` reads a WAV file, prints its format details, computes the
  magnitude spectrum of its samples with an FFT and writes a bar chart of
  the spectrum to a PNG file (`magnitude.png` by default).
- `hex-to-wav` turns a text file with one hexadecimal sample per line into a
  mono PCM WAV file next to it (`capture.hex` becomes `capture.wav`).

## Installation

```
pip install .
```

## Command line

```
wavspectrum recording.wav
wavspectrum recording.wav --verbose
wavspectrum recording.wav -o chart.png
```

`wavspectrum` prints the audio format, channel count, sample rate, bytes
per sample, data size, number of samples and the total number of distinct
frequencies. With `-v` / `--verbose` every frequency and its magnitude is
listed as well. The chart is written to `magnitude.png` in the current
directory, or to the file given with `-o` / `--output`. Magnitudes are
divided by 100 for the chart, and the lowest 5% of the frequencies (where
the DC component sits) are left out of it. If the file cannot be read or is
not a WAV file, an error is printed and the exit status is 1.

```
hex-to-wav capture.hex
hex-to-wav --byte capture.hex
```

Each non-empty line of the input is parsed as a hexadecimal number. By
default the low 16 bits are taken as a signed two's-complement sample and
written as 16-bit PCM at 189810 Hz. With `--byte` the low 8 bits are taken as
an unsigned sample and written as 8-bit PCM at 175750 Hz. The output is
always mono and goes to the input path with its extension replaced by
`.wav`.

## Library use

```python
from wavspectrum.wav_reader import read_wav
from wavspectrum.spectrum import magnitude_spectrum, frequency_bins
from wavspectrum.plot import plot_data

info = read_wav("recording.wav")
print(info.sample_rate, info.num_samples())

spectrum = magnitude_spectrum(info.sample_data, info.sample_rate)
for line in spectrum[:5]:
    print(line.frequency, line.magnitude)

bins = frequency_bins(spectrum)
image = plot_data(bins, 0, len(bins), "magnitude.png")
```

- `read_wav(path)` returns a `WavInfo` with the header fields and the
  samples in `sample_data`. It raises `WavFormatError` (a `ValueError`) when
  the file is not a RIFF/WAVE file, lacks a `fmt ` or `data` chunk, or has a
  sample width outside 8 to 32 bits.
- `magnitude_spectrum(samples, sample_rate)` returns a list of
  `SpectrumLine(frequency, magnitude)`, with whole-hertz frequencies and
  magnitudes truncated to integers; only the first DFT bin of each distinct
  frequency is kept.
- `frequency_bins(spectrum)` divides each magnitude by 100.
- `plot_data(y_values, x_min, x_max, output_file)` draws the values as a
  960×540 bar chart, splitting series longer than 4000 values into stacked
  rows, saves it as PNG and returns the Pillow image. It raises `ValueError`
  for an empty series or when `x_min >= x_max`.

For hexadecimal sample dumps:

```python
from wavspectrum.pcm_hex import SampleFormat, hex_to_wav, output_path_for

count = hex_to_wav("capture.hex", output_path_for("capture.hex"), SampleFormat.PCM16)
```

`SampleFormat.PCM16` (signed 16-bit) and `SampleFormat.PCM8` (unsigned
8-bit) each carry their own sample rate. `hex_to_int16`, `hex_to_uint8`,
`read_hex_samples`, `wav_header` and `encode_wav` are available for working
in memory.

## Limitations

- Samples are read as unsigned little-endian integers of the file's sample
  width. Channels are not separated: interleaved stereo data is analysed as
  one series, and signed PCM is not converted to signed values.
- Only integer PCM widths of 1 to 4 bytes are read; compressed formats are
  not decoded.
- There is no playback and no interactive display; the chart exists only as
  a PNG file.

## Running the tests

```
pip install .[test]
pytest
```