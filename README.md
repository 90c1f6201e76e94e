# cwdit

Tools for working with Morse code (CW):

- the international Morse alphabet (`cwdit.alphabet`)
- an adaptive dot-unit timing estimator (`cwdit.timing`)
- a streaming decoder that turns key-down / key-up intervals into characters
  (`cwdit.decoder`), plus a wrapper that calibrates its speed from the input
  itself (`cwdit.bootstrap`)
- a sample-source interface (`cwdit.source`) and a mono WAV file source
  (`cwdit.wav`)
- helpers for queueing samples from an audio callback (`cwdit.audio`)
- a CW synthesiser that renders text to a mono 16-bit WAV (`cwdit.synth`) and
  the `cwdit-synth` command (`cwdit.synth_cli`)

The package has no third-party dependencies.

## Installation

```
pip install .
```

## The alphabet

```python
from cwdit.alphabet import char_for_pattern, pattern_for_char

pattern_for_char("q")      # "--.-"  (ASCII letters are case-insensitive)
char_for_pattern("...")    # "S"
char_for_pattern("......") # None
```

Letters, digits and common punctuation are covered.

## Decoding a run-length stream

The decoder takes one `(mark, duration)` interval at a time: `mark` is `True`
for key-down and `False` for key-up. Durations can be in any unit, such as
samples or milliseconds, provided the timing estimator uses the same unit.
Marks shorter than 2 T are dits, longer ones dahs; gaps below 2 T separate
elements, gaps below 5 T separate characters, and longer gaps separate words.

```python
from cwdit.decoder import Decoder
from cwdit.timing import TimingEstimator

dec = Decoder(TimingEstimator.from_unit(1), adapt=False)
events = []
events += dec.push(True, 1)    # dit
events += dec.push(False, 3)   # character gap
events += dec.finish()
print("".join(e.render() for e in events))   # "E"
```

Each event is a `cwdit.element.Decoded` whose `kind` is a character, a word
break or an unknown pattern; `render()` gives the character, a space or `?`.
With `adapt=True` (the default) the estimator follows the sender's speed as
marks arrive. `TimingEstimator.from_wpm(wpm, sample_rate_hz)` builds an
estimator from a speed in words per minute (PARIS), and
`TimingEstimator.wpm(sample_rate_hz)` reports the current speed.

If the keying speed is unknown, `BootstrapDecoder` buffers the first few marks
(8 by default), takes the median of the shorter half of their durations as the
dot unit, and then decodes the buffered intervals and everything after them:

```python
from cwdit.bootstrap import BootstrapDecoder
from cwdit.timing import TimingEstimator

dec = BootstrapDecoder(TimingEstimator.from_wpm(20.0, 200.0), target_marks=8)
```

The seed timing is only used if the stream ends before enough marks are seen.

## Reading WAV files

```python
from cwdit.wav import WavSource

src = WavSource.from_path("cq.wav")
print(src.sample_rate(), len(src))
samples = src.read_all()
```

`WavSource.from_bytes` and `WavSource.from_stream` read from memory or an open
binary file. Only mono files are accepted. 16-, 24- and 32-bit integer files
and 32-bit float files are read as floats scaled to `[-1.0, 1.0]`. Other
layouts raise `cwdit.source.UnsupportedFormatError`; malformed files raise
`cwdit.source.DecodeError`. `read(size)` returns up to `size` samples and an
empty list at the end of the file.

## Audio callback helpers

`cwdit.audio.forward_frames(data, channels, sink, convert)` takes channel 0 of
each interleaved frame, converts it with `f32_to_float`, `i16_to_float` or
`u16_to_float`, and puts it on a `queue.Queue` without blocking. It returns
the number of samples dropped because the queue was full.

## Synthesising CW audio

```python
from cwdit.synth import Track, SynthOptions, synth_to_path

synth_to_path("cq.wav", [Track("CQ DE W1AW", 20.0, 700.0)], SynthOptions())
```

Several tracks are mixed into one channel, all starting after the lead
silence. `synth_bytes` returns the WAV file as bytes instead. A character with
no Morse pattern raises `UnknownCharError`; an empty track list raises
`EmptyTracksError`.

From the command line, with a single track:

```
cwdit-synth -o cq.wav -t "CQ DE W1AW" -f 700 -w 20
```

With several tracks, each given as `TEXT:WPM:TONE`:

```
cwdit-synth -o two.wav -c "CQ DE W1AW:18:600" -c "QRZ:20:1400"
```

Run `cwdit-synth --help` to see every option: sample rate, lead and tail
silence, ramp length and peak amplitude. On error the command prints
`cwdit-synth: <message>` to standard error and exits with status 1.

## What the package does not do

- It does not turn audio into key-down / key-up intervals. There is no tone
  detector, envelope follower or threshold; the decoder needs its
  `(mark, duration)` stream from elsewhere.
- It does not open sound devices or capture live audio. `cwdit.audio` only
  converts and queues samples handed to it.
- It has no band scanner, multi-channel decoding front end, web server or
  decoding command.

## Tests

```
pip install .[test]
pytest
```