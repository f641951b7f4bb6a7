# maakit

A small library of everyday building blocks.

- `maakit.strings`: `replace_all`, `replace_all_map`, `trim`, `to_lower`, `to_upper` and `split`. Each one works on `str` or `bytes` and returns the same type.
- `maakit.dispatcher`: `Dispatcher`, an observer registry. Every observer gets a numeric id that is unique across the whole process.
- `maakit.files`: `read_file`, which returns a file's bytes, or empty bytes when the file cannot be opened.
- `maakit.osutils`: `ProcessInfo`, `list_processes`, `get_process_path`, `to_path` and `path_to_utf8_string`.
- `maakit.winargs`: Windows command-line quoting and parsing with `escape_one`, `args_to_cmd` and `cmd_to_args`.
- `maakit.jsonkit.value`: a JSON document model made of `JsonValue`, `JsonObject`, `JsonArray`, `ValueType` and `JsonError`. It gives exact compact output (`to_string`) and indented output (`format`, `dumps`).
- `maakit.jsonkit.typed`: checks and conversions driven by a type: `is_of`, `convert`, `all_of`, `as_map`, `get` and `find`.
- `maakit.jsonkit.serialization`: `serialize` and `deserialize`, which recurse through containers. Both take an optional table of custom handlers.
- `maakit.jsonkit.jsonization`: `Jsonization` and `Field`, which map object attributes to and from members of a JSON object.
- `maakit.jsonext`: JSON forms for `Point` (`[x, y]`), `Rect` (`[x, y, width, height]`) and filesystem paths (`path_to_json`, `path_from_json`).
- `maakit.imageio`: `imread` and `imwrite`, built on Pillow and NumPy.

## Installation

```
pip install maakit
```

To install with the test dependencies:

```
pip install "maakit[test]"
```

## Examples

### Strings

```python
from maakit.strings import replace_all, split, trim, to_upper

replace_all("a-b-c", "-", "+")   # "a+b+c"
split("x,y,z", ",")              # ["x", "y", "z"]
split("", ",")                   # []
trim("  padded  ")               # "padded"  (only spaces are stripped, not tabs)
to_upper("abc-é")                # "ABC-é"   (only ASCII letters change)
```

If the text to replace is empty, `replace_all` raises `ValueError`.

### Observers

```python
from maakit.dispatcher import Dispatcher

events = Dispatcher()
observer_id = events.register_observer(print)
events.dispatch(lambda observer: observer("hello"))
events.unregister_observer(observer_id)   # True
```

Registering `None` returns `0` and registers nothing. Observers are called in the order they were registered.

### Processes and paths

```python
import os
from maakit.osutils import list_processes, get_process_path

for info in sorted(list_processes()):
    print(info)                 # "<pid> <name>"

get_process_path(os.getpid())   # Path to the running executable, or None
```

On Linux, processes are read from `/proc`. On other systems they are read through psutil. `ProcessInfo` values compare and sort by pid only.

### Windows command lines

```python
from maakit.winargs import args_to_cmd, cmd_to_args

cmd = args_to_cmd(["prog.exe", "two words", 'say "hi"'])
cmd_to_args(cmd)   # ["prog.exe", "two words", 'say "hi"']
```

### JSON values

```python
from maakit.jsonkit.value import JsonValue

doc = JsonValue({"name": "demo", "sizes": [1, 2, 3]})
doc["name"].as_string()   # "demo"
doc["extra"]["deep"] = 1  # missing keys are created as objects
print(doc.to_string())    # {"extra":{"deep":1},"name":"demo","sizes":[1,2,3]}
print(doc.dumps(4))
```

Objects keep their keys in sorted order. Using a value as a type it does not hold raises `JsonError`.

### Typed access

```python
from maakit.jsonkit.typed import get, find, convert
from maakit.jsonkit.value import JsonValue

doc = JsonValue({"a": {"b": [10, 20]}})
get(doc, "a", "b", 1, 0)          # 20
get(doc, "a", "missing", "none")  # "none"
find(doc, "a", dict[str, list[int]])
convert(JsonValue([1, 2]), tuple[int, int])   # (1, 2)
```

### Field mapping

```python
from maakit.jsonkit.jsonization import Field, Jsonization

class Config:
    def __init__(self):
        self.name = ""
        self.retries = 0

mapping = Jsonization("name", Field("retries", optional=True, key="retry_count"))
cfg = mapping.from_json({"name": "demo"}, Config())
mapping.to_json(cfg).to_string()   # {"name":"demo","retry_count":0}
```

### Points, rectangles and images

```python
from maakit.jsonext import Rect
from maakit.imageio import imread, imwrite

Rect.from_json([1, 2, 30, 40])   # Rect(x=1, y=2, width=30, height=40)

image = imread("input.png")      # RGB uint8 array, or None
if image is not None:
    imwrite("out/copy.png", image)   # parent folders are created
```

## What this package does not do

It has no logging facility, no helpers for running a callback when a scope ends, and no UUID or library-location helpers. Use the standard library's `logging`, `contextlib` and `uuid` for these. It provides no command-line programs.