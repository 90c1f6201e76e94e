import math

import pytest

from cwdit.alphabet import pattern_for_char
from cwdit.decoder import Decoder
from cwdit.element import Decoded
from cwdit.timing import TimingEstimator

_U64 = (1 << 64) - 1


def synth(text, t=1):
    out = []
    for word_index, word in enumerate(text.split(" ")):
        if word_index:
            out.append((False, 7 * t))
        for char_index, ch in enumerate(word):
            if char_index:
                out.append((False, 3 * t))
            pattern = pattern_for_char(ch)
            assert pattern is not None, ch
            for elem_index, glyph in enumerate(pattern):
                if elem_index:
                    out.append((False, t))
                out.append((True, t if glyph == "." else 3 * t))
    return out


def run(dec, events):
    out = []
    for mark, duration in events:
        out.extend(dec.push(mark, duration))
    out.extend(dec.finish())
    return out


def decode(dec, events):
    return "".join(event.render() for event in run(dec, events))


def jitter(events, max_fraction, seed):
    state = seed

    def rng():
        nonlocal state
        state ^= (state << 13) & _U64
        state ^= state >> 7
        state ^= (state << 17) & _U64
        bits = (state >> 40) & 0xFFFFFFFF
        return (bits / 4294967296.0) * 2.0 - 1.0

    result = []
    for mark, duration in events:
        delta = rng() * max_fraction * duration
        jittered = max(math.floor(duration + delta + 0.5), 1)
        result.append((mark, jittered))
    return result


def test_quick_start_single_e():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    out = dec.push(True, 1) + dec.push(False, 3)
    assert out == [Decoded.char("E")]


def test_decodes_single_character():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    assert run(dec, synth("S")) == [Decoded.char("S")]


def test_decodes_single_word():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    assert run(dec, synth("SOS")) == [
        Decoded.char("S"),
        Decoded.char("O"),
        Decoded.char("S"),
    ]


def test_decodes_word_break():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    assert run(dec, synth("CQ DE")) == [
        Decoded.char("C"),
        Decoded.char("Q"),
        Decoded.word_break(),
        Decoded.char("D"),
        Decoded.char("E"),
    ]


def test_unknown_pattern_emits_unknown():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    events = []
    for i in range(8):
        if i:
            events.append((False, 1))
        events.append((True, 1))
    assert run(dec, events) == [Decoded.unknown()]


def test_overlong_pattern_emits_single_unknown():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    events = []
    for i in range(15):
        if i:
            events.append((False, 1))
        events.append((True, 1))
    assert run(dec, events) == [Decoded.unknown()]


def test_finish_flushes_trailing_pattern():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    dec.push(True, 1)
    dec.push(False, 1)
    dec.push(True, 3)
    dec.push(False, 1)
    dec.push(True, 1)
    assert dec.finish() == [Decoded.char("R")]


def test_leading_and_trailing_silence_produce_no_word_breaks():
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    events = [(False, 20)] + synth("E") + [(False, 20)]
    assert run(dec, events) == [Decoded.char("E")]


def test_finish_on_empty_stream_is_empty():
    dec = Decoder(TimingEstimator.from_unit(1))
    assert dec.finish() == []


def test_timing_adapts_when_enabled():
    dec = Decoder(TimingEstimator.from_unit(100))
    for _ in range(50):
        dec.push(True, 50)
        dec.push(False, 50)
    assert abs(dec.timing().unit() - 50) <= 2


def test_timing_fixed_when_adapt_disabled():
    dec = Decoder(TimingEstimator.from_unit(100), adapt=False)
    for _ in range(50):
        dec.push(True, 50)
        dec.push(False, 50)
    assert dec.timing().unit() == 100


def test_perfect_timing_at_t1_decodes_cq_de_w1aw():
    text = "CQ DE W1AW"
    dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
    assert decode(dec, synth(text, 1)) == text


def test_perfect_timing_at_realistic_sample_rate():
    text = "HELLO WORLD"
    dec = Decoder(TimingEstimator.from_wpm(20.0, 48_000.0), adapt=False)
    assert decode(dec, synth(text, 2_880)) == text


def test_decodes_digits_and_punctuation():
    text = "DE W1AW 73 ES CUL"
    dec = Decoder(TimingEstimator.from_unit(10), adapt=False)
    assert decode(dec, synth(text, 10)) == text


def test_survives_ten_percent_jitter():
    text = "CQ CQ CQ DE W1AW W1AW K"
    noisy = jitter(synth(text, 100), 0.10, 0x00C0_FFEE)
    dec = Decoder(TimingEstimator.from_unit(100))
    assert decode(dec, noisy) == text


def test_adapts_from_wrong_initial_estimate():
    preamble = synth("EEEEEEEEEE EEEEE", 100)
    message = synth("TEST DE N0CALL", 100)
    dec = Decoder(TimingEstimator.from_unit(60))
    decode(dec, preamble)
    assert decode(dec, message) == "TEST DE N0CALL"


@pytest.mark.parametrize("wpm", [12.0, 18.0, 25.0, 35.0])
def test_different_wpm_rates_decode_cleanly(wpm):
    sample_rate = 48_000.0
    t = math.floor(1.2 * sample_rate / wpm + 0.5)
    text = "CQ TEST"
    dec = Decoder(TimingEstimator.from_wpm(wpm, sample_rate), adapt=False)
    assert decode(dec, synth(text, t)) == text