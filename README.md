# gadgetry

A grab-bag of small helpers for everyday Python code, using only the
standard library.

## Installation

    pip install gadgetry

## What's inside

| Module | Purpose |
| --- | --- |
| `gadgetry.misc` | value coercion (`as_float`, `as_str`), JSON to and from files, `parse_version`, `log_error` |
| `gadgetry.sync` | lock helpers (`using`, `MutexIf`) and running callables concurrently (`wait_on`) or in order (`wait_on_sequential`) |
| `gadgetry.slices` | list helpers: unique appends, removal, `without`, equivalence, case-insensitive lookup |
| `gadgetry.buffer` | `Buffer`, a string builder with %-style `write` and `writeln` |
| `gadgetry.matcher` | simple wildcard patterns (`foo*`, `*bar`, `*baz*`) via `Matcher`, `Pattern` and `matches_any` |
| `gadgetry.strutil` | string helpers: splitting, prefixes, pluralising, identifier extraction, number parsing |
| `gadgetry.walker` | `DirWalker`, a configurable recursive directory walker |
| `gadgetry.fs` | file-system helpers: copying, clearing, zip extraction, freshness checks, shell-style name matching |
| `gadgetry.num` | scalar maths: clamping, interpolation, powers of two, rounding |
| `gadgetry.vec2`, `gadgetry.vec3`, `gadgetry.vec4` | 2D, 3D and 4D vectors (`Vec2`, `Vec3`, `Vec4`) |
| `gadgetry.quat` | quaternions (`Quat`) |
| `gadgetry.mat3`, `gadgetry.mat4` | 3x3 and column-major 4x4 matrices (`Mat3`, `Mat4`) |
| `gadgetry.gfx` | colour records (`Rgba32`, `Rgba64`), gamma/linear conversion, saving pixel rows as an RGBA PNG |
| `gadgetry.geo` | latitude and longitude limits |
| `gadgetry.net` | host name, readable addresses (`addr`), opening and downloading remote files |
| `gadgetry.system` | OS names and the user's home and data directories |

## Examples

```python
from gadgetry.matcher import matches_any
from gadgetry.strutil import pluralize
from gadgetry.misc import parse_version
from gadgetry.vec3 import Vec3

matches_any("report.txt", "*.txt", "draft*")   # True
pluralize("dictionary")                        # "dictionaries"
parse_version("3.2.0 - Build 8.15.10.2761")    # ((3, 2), 3.2)

v = Vec3(1.0, 0.0, 0.0)
v.cross(Vec3(0.0, 1.0, 0.0))                   # Vec3(x=0.0, y=0.0, z=1.0)
```

Walking a directory tree:

```python
from gadgetry.fs import walk_all_files

def show(path):
    print(path)
    return True   # keep walking

errors = walk_all_files("some/dir", show)
```

`walk_all_files` returns the list of `OSError`s met while reading
directories; returning `False` from the visitor stops visiting the rest of
the current directory.

## What it does not do

`gadgetry` is a library only: it installs no command-line tools, and it
offers no hash functions or file-system change watching.

## Running the tests

    pip install "gadgetry[test]"
    pytest