def fs():
  import tempfile
  from boostfs.impl.fsspec import FSSpec
  from fsspec.implementations.local import LocalFileSystem
  with tempfile.TemporaryDirectory() as tmp:
    with FSSpec(LocalFileSystem(), cwd=tmp) as fs:
      yield fs
