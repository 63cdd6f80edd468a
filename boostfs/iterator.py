''' Lazy enumeration of a directory's entries over a backend directory handle
'''
import errno
import typing as t
import logging
from boostfs import context
from boostfs.spec import FS
from boostfs.path import Path, PathLike
from boostfs.errors import OpenError, reraise

logger = logging.getLogger(__name__)

class DirectoryEntry:
  def __init__(self, path: PathLike):
    self._path = Path(path)

  @property
  def path(self) -> Path:
    return self._path

  def __fspath__(self) -> str:
    return self._path.string()

  def __repr__(self) -> str:
    return f"DirectoryEntry({self._path.string()!r})"

class DirectoryIterator:
  ''' A single pass over the entries of one directory, `.` and `..` included.

  Constructed with a path it opens a backend handle and is immediately positioned on
  the first entry. Constructed without, it is the end sentinel. The handle is released
  exactly once: when the entries run out, on `close()`, on leaving a `with` block, or
  when the iterator is collected. Iterators can't be copied, `move()` hands the handle
  over to a new iterator instead.

  Usage:
  it = DirectoryIterator('some/dir')
  while it != DirectoryIterator():
    print(it.entry.path)
    it.advance()
  '''
  def __init__(self, path: t.Optional[PathLike] = None):
    self._fs: t.Optional[FS] = None
    self._handle: t.Optional[int] = None
    self._name: t.Optional[str] = None
    self._path = Path()
    if path is None:
      return
    self._path = Path(path)
    if self._path.empty():
      raise OpenError('Cannot open directory with an empty path', '', errno.ENOENT)
    fs = context.get_fs()
    with reraise(OpenError, f"Cannot open directory {self._path}", self._path):
      self._handle = fs.opendir(self._path.string())
    logger.debug(f"opendir({self._path.string()!r}) -> {self._handle}")
    self._fs = fs
    try:
      self.advance()
    except BaseException:
      self.close()
      raise

  def at_end(self) -> bool:
    return self._handle is None

  def advance(self) -> 'DirectoryIterator':
    if self._handle is not None:
      self._name = self._fs.readdir(self._handle)
      if self._name is None:
        self.close()
    return self

  @property
  def entry(self) -> DirectoryEntry:
    if self._handle is None:
      raise ValueError('Cannot dereference the end iterator')
    return DirectoryEntry(self._path / self._name)

  def close(self):
    handle, self._handle = self._handle, None
    self._name = None
    if handle is not None:
      self._fs.closedir(handle)

  def move(self) -> 'DirectoryIterator':
    ''' Transfer the open handle to a new iterator, leaving this one at the end
    '''
    other = DirectoryIterator()
    other._fs, other._handle, other._name, other._path = self._fs, self._handle, self._name, self._path
    self._fs, self._handle, self._name, self._path = None, None, None, Path()
    return other

  def __copy__(self):
    raise TypeError('DirectoryIterator owns a directory handle and cannot be copied, use move()')

  def __deepcopy__(self, memo):
    self.__copy__()

  def __eq__(self, other) -> bool:
    if not isinstance(other, DirectoryIterator): return NotImplemented
    if self._handle is None and other._handle is None:
      return True
    return (
      self._fs is other._fs
      and self._handle == other._handle
      and self._name == other._name
      and self._path == other._path
    )

  def __ne__(self, other) -> bool:
    if not isinstance(other, DirectoryIterator): return NotImplemented
    return not self == other

  __hash__ = None

  def __iter__(self):
    return self

  def __next__(self) -> DirectoryEntry:
    if self._handle is None:
      raise StopIteration
    entry = self.entry
    self.advance()
    return entry

  def __enter__(self):
    return self

  def __exit__(self, *args):
    self.close()

  def __del__(self):
    # may run on a partially constructed iterator
    if getattr(self, '_handle', None) is not None:
      self.close()

  def __repr__(self) -> str:
    if self._handle is None:
      return 'DirectoryIterator()'
    return f"DirectoryIterator({self._path.string()!r}, entry={self._name!r})"

directory_entry = DirectoryEntry
directory_iterator = DirectoryIterator
