import pytest

from cwdit.synth import Track
from cwdit.synth_cli import main, parse_channel
from cwdit.wav import WavSource


def test_single_track_roundtrip_via_cli(tmp_path):
    wav = tmp_path / "single.wav"
    status = main(
        ["-o", str(wav), "-t", "CQ DE W1AW", "-f", "700", "-w", "18", "-s", "8000"]
    )
    assert status == 0
    src = WavSource.from_path(wav)
    assert int(src.sample_rate()) == 8000


def test_multi_channel_accepts_colon_spec(tmp_path):
    wav = tmp_path / "multi.wav"
    status = main(
        ["-o", str(wav), "-c", "CQ DE W1AW:18:600", "-c", "QRZ:20:1400", "-s", "8000"]
    )
    assert status == 0
    src = WavSource.from_path(wav)
    assert int(src.sample_rate()) == 8000


def test_unknown_character_reports_error(tmp_path, capsys):
    wav = tmp_path / "bad.wav"
    status = main(["-o", str(wav), "-t", "A#B"])
    assert status != 0
    assert "cwdit-synth:" in capsys.readouterr().err
    assert not wav.exists()


def test_bad_channel_spec_reports_error(tmp_path, capsys):
    wav = tmp_path / "bad.wav"
    status = main(["-o", str(wav), "-c", "QRZ:20"])
    assert status == 1
    assert "expected TEXT:WPM:TONE" in capsys.readouterr().err


def test_parse_channel_basic():
    assert parse_channel("CQ DE W1AW:18:600") == Track("CQ DE W1AW", 18.0, 600.0)


def test_parse_channel_text_may_contain_colons():
    assert parse_channel("A:B:20:1400") == Track("A:B", 20.0, 1400.0)


@pytest.mark.parametrize(
    ("spec", "message"),
    [
        ("QRZ:20", "expected TEXT:WPM:TONE"),
        ("QRZ:20:high", "bad tone"),
        ("QRZ:fast:700", "bad wpm"),
    ],
)
def test_parse_channel_errors(spec, message):
    with pytest.raises(ValueError, match=message):
        parse_channel(spec)