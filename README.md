# drills

A collection of small command-line utilities and the library code behind
them:

- unit conversion for temperature, length, weight and time, with float
  subclasses that print with their unit;
- echoing command-line arguments, plain or indexed;
- finding lines that repeat within files;
- drawing animated Lissajous figures as GIF images, and serving them over HTTP;
- fetching URLs, singly or concurrently, with timing reports;
- counting set bits in 64-bit integers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `drills-cf`: Celsius and Fahrenheit

Reads each argument as a number and shows it both as Fahrenheit converted to
Celsius and as Celsius converted to Fahrenheit.

```
$ drills-cf 8 16 32
8°F = -13.333333333333334°C, 8°C = 46.4°F
16°F = -8.88888888888889°C, 16°C = 60.8°F
32°F = 0°C, 32°C = 89.6°F
```

Decimal numbers, hexadecimal floats (`0x1p-2`), `inf`/`infinity` and `nan` are
accepted. At the first argument that is not a number, or that overflows, the
command prints a message prefixed with `cf:` on standard error and exits with
status 1. Lines for the arguments before it have already been printed.

### `drills-units`: general unit conversion

Converts each number into temperature, length, weight and time. A rule is
printed before each block and once more after the last:

```
$ drills-units 8
----------------------------------------------------------------
8°F = -13.333333333333334°C, 8°C = 46.4°F
8.00 ft. = 2.44 M, 8.00 M = 26.25 ft.
8.00 Kg = 17.64 lb., 8.00 lb. = 3.63 Kg
8.00 ps = 0.01 ns, 8.00 ns = 8000.00 ps
----------------------------------------------------------------
```

Bad numbers are handled as in `drills-cf`, with the same `cf:` prefix.

### `drills-echo`: echo arguments

Prints its arguments joined by single spaces.

### `drills-dup`: duplicate lines

Counts lines in the named files, or in standard input when no file is given,
and prints every line that occurs more than once as `count<TAB>file/line`.
Standard input is named `/dev/stdin`. Counts are kept per file, so the same
text in two different files is not a duplicate. A file that cannot be opened
is reported on standard error and skipped.

```
$ drills-dup names1 names2
2	names1/Alan
3	names2/Aidan
```

### `drills-lissajous-server`: Lissajous GIFs over HTTP

Starts a threaded HTTP server on every interface. The port is 8000 unless
`--port` (or `-port`) gives another. It answers every GET request with a newly
drawn animated Lissajous GIF in red, green and blue on black.

```
$ drills-lissajous-server --port 8000
```

Then open `http://localhost:8000/?cycles=20` in a browser. The `cycles` query
parameter sets the number of full oscillations of the x oscillator. The server
starts at 5, and the last value given stays in force for later requests. A
value that is not a 64-bit integer gets a `400 Bad Request` with the parse
error as its text, and the stored count is then reset to 0. Request logs go to
the `drills.server` logger. Interrupting the command stops the server.

## Library

### Unit conversion

Each unit is a `float` subclass whose `str()` carries the unit.

- `drills.tempconv`: `Celsius`, `Fahrenheit` and `Kelvin`, shown in
  shortest `%g` style (for example `100°C`). Conversions are `c_to_f`,
  `f_to_c`, `c_to_k`, `k_to_c`, `k_to_f` and `f_to_k`. `format_g` gives the
  formatting used by these types. The module also has constants for absolute
  zero, freezing and boiling points, such as `ABSOLUTE_ZERO_C`, `FREEZING_K`
  and `BOILING_F`.
- `drills.lenconv`: `Meter` and `Foot`, shown with two decimals, and
  `ft_to_met` and `met_to_ft`, using 1 m = 3.281 ft.
- `drills.wtconv`: `Kg` and `Lb`, shown with two decimals, and `kg_to_lb` and
  `lb_to_kg`, using 1 kg = 2.205 lb.
- `drills.timeconv`: `PicoSec`, `NanoSec`, `MicroSec`, `MilliSec` and `Sec`.
  `MilliSec` shows six decimals and the others show two. Conversions are
  `ms_to_sec`, `ms_to_ns`, `ms_to_micro_sec`, `ns_to_sec`, `ns_to_ms`,
  `ns_to_micro_sec`, `ns_to_ps`, `ps_to_ns`, `ps_to_micro_sec`, `ps_to_ms`,
  `ps_to_sec`, `sec_to_ns`, `sec_to_micro_sec` and `sec_to_milli_sec`.

```python
from drills.tempconv import Celsius, c_to_f

print(c_to_f(Celsius(100)))   # 212°F
```

### Bit counting

`drills.popcount` looks bytes up in a 256-entry table. Values outside the
unsigned 64-bit range raise `ValueError`.

- `pop_count_old` and `pop_count_new` return the number of set bits.
- `pop_count` looks up only the two lowest bytes as bytes. For the upper six
  lookups it takes `(x >> k) * 8` instead. It equals the true bit count only
  for small values (below 4), so use the other two for real counts.

```python
from drills.popcount import pop_count_new

pop_count_new(20)   # 2
```

### Echo and duplicates

- `drills.echo` has `join_args` for the space-joined form.
  - `indexed_lines` puts each argument on its own line (`index: 0, value: a`),
    with every line ending in a newline.
  - `indexed_text` gives the same lines joined by newlines, with no trailing
    newline.
- `drills.dup` has two functions:
  - `count_lines(stream, name, counts)` adds to `counts["name/line"]`.
  - `find_duplicates(paths, stdin=None)` returns a dict of the lines seen more
    than once.

### Lissajous figures

`drills.lissajous` draws 64-frame, 201×201 animated GIFs with an 80 ms frame
delay.

- `render_frames(cycles, color_index, palette, freq)` returns the frames as
  Pillow palette images. When `freq` is not given, a random value in [0, 3) is
  used. A bad palette size or colour index raises `ValueError`.
- `lissajous(out, ...)` writes the GIF to a binary stream.
- `green_on_black(out)` writes the green-on-black variant.
- `write_color_series(directory)` writes `file_1.gif`, `file_2.gif` and
  `file_3.gif` in red, green and blue, and returns their paths.

The palettes `GREEN_ON_BLACK` and `FOUR_COLORS` are available, along with the
index constants `BLACK_INDEX`, `RED_INDEX`, `GREEN_INDEX` and `BLUE_INDEX`.

`drills.server` provides `LissajousHandler`, `LissajousServer` and
`make_server(port)` for running the HTTP server from your own code.

### Fetching

`drills.fetch` uses the standard library's HTTP client. Failures raise
`FetchError`. An HTTP error status does not raise; its response is used like
any other.

- `normalize_url` adds `http://` to addresses that start with neither
  `http://` nor `https://`.
- `copy_url(url, out=None)` streams a response body into a binary stream
  (standard output by default) and returns the number of bytes copied.
- `fetch(url)` returns the body.
- `fetch_with_status(url)` appends the status as an HTML comment, for example
  `<!-- 200 OK -->`.
- `fetch_report(url, timeout=None)` times one request and returns a one-line
  report. Failures are reported in the text rather than raised.
- `fetch_all(urls, timeout=None, directory=".")` fetches all URLs
  concurrently. It writes their reports, in order of completion, followed by
  the total elapsed time, to `out_DD_MM_YYYY__HH_MM_SS.txt` in the directory,
  and returns that path.

## What it does not do

There is no command for fetching URLs or for writing Lissajous GIFs to files.
Those are available only as the library functions above.