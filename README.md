# mmsparts

This package provides small value types that describe the parts of an MMS message. It has one module, `mmsparts.mmspart`.

- `MmsPart` is a dataclass. It holds a part's `file_name`, `content_type` and `content_id`. Each field defaults to an empty string.
- `MmsPartFd` holds the same three fields. It also owns a read-only file descriptor for the part's data, so a receiver can read the data without access to the sender's file system.

Both types can be turned into a plain tuple, called a "struct", and built back from one. The tuple fields come in the order used on the message bus.

## Installing

```
pip install mmsparts
```

With the test requirements:

```
pip install "mmsparts[test]"
```

## Usage

```python
from mmsparts.mmspart import MmsPart, MmsPartFd

part = MmsPart(file_name="photo.jpg", content_type="image/jpeg", content_id="<photo>")
struct = part.to_struct()          # ("photo.jpg", "image/jpeg", "<photo>")
assert MmsPart.from_struct(struct) == part

with MmsPartFd.open("/tmp/photo.jpg", "image/jpeg", "<photo>") as fd_part:
    print(fd_part.file_name)       # "photo.jpg"
    print(fd_part.is_open())       # True
    dup = fd_part.copy()           # holds its own duplicate descriptor
    fd, name, ctype, cid = fd_part.to_struct()
    received = MmsPartFd.from_struct((fd, name, ctype, cid))  # duplicates fd
    received.close()
    dup.close()
```

## Descriptor ownership

- `MmsPartFd.open(path, content_type, content_id)` opens `path` read-only. It sets `file_name` to the base name of the path.
- If the file cannot be opened, `open` still returns a part. In that case:
  - `is_open()` returns `False`.
  - `fileno()` raises `ValueError`.
  - `to_struct()` gives `None` as the descriptor.
- `to_struct()` returns `(fd, file_name, content_type, content_id)`. The part keeps ownership of `fd`.
- `from_struct(struct)` duplicates the descriptor it is given, and the caller keeps its own. A descriptor of `None`, or a negative one, produces a part with no open file.
- `copy()` returns a new part with a duplicate of the descriptor, or with no descriptor if the original has none.
- The descriptor is closed in any of these cases:
  - `close()` is called. Calling it again does nothing.
  - A `with` block that uses the part ends.
  - The part is garbage collected.

## What this package does not do

- It does not send or receive MMS messages.
- It does not connect to a message bus or marshal data onto one.
- It does not register types with any bus.

It only builds the tuples; moving them to and from a transport is up to the caller.