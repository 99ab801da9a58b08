# hudcore

Building blocks for a performance heads-up display: parsers for overlay
option strings, frame-time statistics, frame-rate limiting, window
placement, FCAT frame markers and decoding of NV-CONTROL GPU attribute
strings. It uses only the standard library.

## Installation

```
pip install hudcore
```

To run the tests:

```
pip install "hudcore[test]"
pytest
```

## Modules

- `hudcore.overlay_params` parses single option values:
  `parse_position`, `parse_float`, `parse_unsigned`, `parse_signed`,
  `parse_color`, `parse_load_color`, `parse_load_value`, `parse_fps_limit`,
  `parse_fps_sampling_period`, `parse_benchmark_percentiles`,
  `parse_font_glyph_ranges`, `parse_gl_size_query`, `parse_path`,
  `str_tokenize` and `parse_str_tokenize`. The enumerations `Position`,
  `GlSizeQuery` and `FontGlyphRange` hold the parsed choices.
  `split_options` breaks a `key=value,flag:key=value` string into
  `(key, value)` pairs. A key with no `=` gets the value `"1"`, and a
  backslash escapes a delimiter inside a value.
- `hudcore.frame_stats` has `SwapchainStats`. Its `record_frame` keeps a
  ring of 200 frame times, updates min/max frame time and recomputes FPS
  once per sampling period. Its `time_stat` reads the history oldest first.
  The module also has `FpsLimiter`, which sleeps towards a target frame time
  and learns its own overhead. `target_frame_time` turns an FPS limit list
  into nanoseconds. `format_pci_dev` normalises a `domain:bus:slot.func`
  address to `dddd:bb:ss.f`.
- `hudcore.hud_layout` places the HUD window for a `Position`
  (`position_window`) and clamps scrolling ticker text
  (`ticker_limited_pos`). `change_on_load_temp` blends a colour between
  low, medium and high thresholds given in `LoadData`, and `center_text_x`
  gives the x position that centres text.
- `hudcore.fcat` has `FcatOverlay`. It returns the standard 16-colour FCAT
  sequence per frame (`next_color`) and the geometry of the marker strip on
  any screen edge (`overlay_corners`).
- `hudcore.nvctrl` turns `key=value, key=value` attribute strings into a
  dict (`parse_attribute_string`). `info_from_attributes` builds an
  `NvctrlInfo` reading from that dict.
- `hudcore.timing` has a monotonic nanosecond clock (`get_nano`),
  `sleep_us`, `time_timeout` and `absolute_timeout`, and the polling waits
  `wait_until_zero` and `wait_until_zero_abs_timeout`.
- `hudcore.engine_types` has the `EngineType` enumeration and
  `engine_name`.

## Example

```python
from hudcore.overlay_params import parse_fps_limit, parse_position, split_options
from hudcore.frame_stats import target_frame_time

options = dict(split_options("fps,position=top-right,fps_limit=60+144"))
position = parse_position(options["position"])    # Position.TOP_RIGHT
limits = parse_fps_limit(options["fps_limit"])    # [60, 144]
print(position, limits, target_frame_time(limits))
```

## What it does not do

- There is no object holding the full set of overlay settings with their
  defaults. Nothing reads a config file or merges options into such an
  object either. You get the pairs from `split_options` and pass each
  value to the parser it needs.
- It does not read a `pci.ids` database, so it cannot turn vendor and
  device ids into names.
- It does not open a control socket.
- It does not draw anything, query GPU drivers or read hardware sensors.
  The functions work on values you pass in.