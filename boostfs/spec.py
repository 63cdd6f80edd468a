''' The generic backend interface boostfs runs its path operations against
'''
import typing as t
from boostfs.utils.convention import PathConvention, get as get_convention, native

TypedDict = t.TypedDict if getattr(t, 'TypedDict', None) else dict

FileType = t.Literal['file', 'directory', 'other'] if getattr(t, 'Literal', None) else str

class FileStat(TypedDict):
  type: FileType
  size: int
  mtime: float

class FS:
  ''' A generic class interface for the OS capabilities boostfs consumes.

  Paths arrive as plain text in the backend's native convention and may be relative,
  in which case they are relative to the backend's current working directory.
  Failures are reported by raising `OSError` (or a subclass).
  '''
  def __init__(self, convention: t.Union[PathConvention, str, None] = None) -> None:
    self.convention = native() if convention is None else get_convention(convention)

  @staticmethod
  def from_dict(*, cls, **kwargs):
    import importlib
    mod, _, name = cls.rpartition('.')
    cls = getattr(importlib.import_module(mod), name)
    if cls.from_dict is FS.from_dict: return cls(**kwargs)
    else: return cls.from_dict(**kwargs)

  def to_dict(self) -> t.Dict[str, t.Any]:
    cls = self.__class__
    return dict(cls=f"{cls.__module__}.{cls.__name__}", convention=self.convention.name)

  # essential
  def stat(self, path: str) -> FileStat:
    raise NotImplementedError()

  def opendir(self, path: str) -> int:
    raise NotImplementedError()
  def readdir(self, handle: int) -> t.Optional[str]:
    raise NotImplementedError()
  def closedir(self, handle: int):
    raise NotImplementedError()

  def mkdir(self, path: str):
    raise NotImplementedError()
  def rmdir(self, path: str):
    raise NotImplementedError()
  def unlink(self, path: str):
    raise NotImplementedError()

  def getcwd(self) -> str:
    raise NotImplementedError()
  def chdir(self, path: str):
    raise NotImplementedError()

  # optional
  def lstat(self, path: str) -> FileStat:
    return self.stat(path)
  def start(self):
    pass
  def stop(self):
    pass

  def __enter__(self):
    self.start()
    return self

  def __exit__(self, *args):
    self.stop()

  def __repr__(self) -> str:
    return f"FS({repr(self.to_dict())})"
