import math

import pytest

from wavspectrum.pcm_hex import SampleFormat, encode_wav
from wavspectrum.spectrum import (
    SpectrumLine,
    frequency_bins,
    magnitude_spectrum,
    main,
)


def _write_wav(path, samples):
    path.write_bytes(encode_wav(samples, SampleFormat.PCM16))
    return path


def test_empty_signal_has_no_spectrum():
    assert magnitude_spectrum([], 44100) == []


def test_constant_signal_puts_everything_in_dc():
    samples = [3] * 8
    spectrum = magnitude_spectrum(samples, 8)
    assert [line.frequency for line in spectrum] == list(range(8))
    assert spectrum[0].magnitude == sum(samples)
    assert all(line.magnitude == 0 for line in spectrum[1:])


def test_bins_sharing_a_frequency_keep_the_first():
    samples = [5, 0, 0, 0, 0, 0, 0, 0]
    spectrum = magnitude_spectrum(samples, 4)
    assert [line.frequency for line in spectrum] == [0, 1, 2, 3]
    # An impulse has a flat spectrum equal to its height.
    assert all(line.magnitude == 5 for line in spectrum)


def test_cosine_peaks_at_its_frequency():
    n = 64
    k = 5
    samples = [round(1000 * math.cos(2 * math.pi * k * i / n)) + 1000 for i in range(n)]
    spectrum = magnitude_spectrum(samples, n)
    non_dc = spectrum[1:]
    peak = max(non_dc, key=lambda line: line.magnitude)
    assert peak.frequency in (k, n - k)
    by_frequency = {line.frequency: line.magnitude for line in spectrum}
    assert abs(by_frequency[k] - by_frequency[n - k]) <= 1


def test_magnitudes_are_non_negative_and_frequencies_increase():
    samples = [(i * 37) % 251 for i in range(100)]
    spectrum = magnitude_spectrum(samples, 1000)
    frequencies = [line.frequency for line in spectrum]
    assert frequencies == sorted(set(frequencies))
    assert all(line.magnitude >= 0 for line in spectrum)


def test_frequency_bins_divide_by_hundred():
    spectrum = [SpectrumLine(0, 250), SpectrumLine(1, 99), SpectrumLine(2, 100)]
    assert frequency_bins(spectrum) == [2, 0, 1]


def test_frequency_bins_of_empty_spectrum():
    assert frequency_bins([]) == []


def test_main_without_arguments_fails():
    assert main([]) == 1


def test_main_rejects_non_wav(tmp_path):
    bogus = tmp_path / "bogus.wav"
    bogus.write_bytes(b"not a wav file at all, clearly")
    assert main([str(bogus), "-o", str(tmp_path / "out.png")]) == 1


def test_main_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "missing.wav")]) == 1


def test_main_writes_chart_and_reports(tmp_path, capsys):
    samples = [round(8000 * math.sin(2 * math.pi * 3 * i / 64)) for i in range(64)]
    wav = _write_wav(tmp_path / "tone.wav", samples)
    output = tmp_path / "chart.png"
    assert main([str(wav), "-o", str(output)]) == 0
    assert output.read_bytes().startswith(b"\x89PNG")
    out = capsys.readouterr().out
    assert "Channels: 1" in out
    assert f"Sample Rate: {SampleFormat.PCM16.sample_rate} Hz" in out
    assert "Bytes per Sample: 2" in out
    assert "Number of Samples: 64" in out
    assert "Total Frequencies: 64" in out
    assert "Frequency Domain Representation:" not in out


def test_main_verbose_lists_frequencies(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    wav = _write_wav(tmp_path / "ramp.wav", list(range(32)))
    assert main([str(wav), "--verbose"]) == 0
    assert (tmp_path / "magnitude.png").exists()
    out = capsys.readouterr().out
    assert "Frequency Domain Representation:" in out
    listed = [line for line in out.splitlines() if " Hz: " in line]
    assert len(listed) == 32
    assert listed[0].startswith("0 Hz: ")


@pytest.mark.parametrize("flag", ["-v", "--verbose"])
def test_verbose_flags(tmp_path, capsys, flag):
    wav = _write_wav(tmp_path / "short.wav", [1, 2, 3, 4])
    assert main([str(wav), flag, "-o", str(tmp_path / "c.png")]) == 0
    assert "Frequency Domain Representation:" in capsys.readouterr().out