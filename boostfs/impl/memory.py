''' An in-memory filesystem with its own working directory
'''
import time
import errno
import posixpath
import itertools
import dataclasses
from boostfs.spec import FS, FileStat
from boostfs.utils.convention import POSIX

@dataclasses.dataclass
class MemoryInode:
  info: FileStat
  content: bytes = bytes()

@dataclasses.dataclass
class MemoryDirectoryHandle:
  path: str
  names: list

class Memory(FS):
  ''' Paths are stored as absolute, normalized posix text. With the windows
  convention, drive prefixes like `C:` are kept as the first path segment
  so `C:/a` and `D:/a` stay distinct.
  '''
  def __init__(self, convention = POSIX, cwd: str = '/'):
    super().__init__(convention)
    self._inodes: dict[str, MemoryInode] = {}
    self._dirs: dict[str, set[str]] = {}
    self._cfd = iter(itertools.count(start=5))
    self._fds: dict[int, MemoryDirectoryHandle] = {}
    self._cwd = '/'
    self._add_dir('/')
    key = self._key(cwd)
    for parent in reversed(list(self._ancestors(key))):
      self._add_dir(parent)
    self._add_dir(key)
    self._cwd = key

  def to_dict(self):
    return dict(super().to_dict(),
      cwd=self._text(self._cwd),
    )

  def _key(self, path: str) -> str:
    if not str(path): raise FileNotFoundError(path)
    path = self.convention.forward_slashes(str(path))
    if self.convention.has_drive_root(path):
      path = '/' + path
    elif not path.startswith('/'):
      path = posixpath.join(self._cwd, path)
    return posixpath.normpath(path).replace('//', '/')

  def _ancestors(self, key: str):
    while key != '/':
      key = posixpath.dirname(key)
      yield key

  def _add_dir(self, key: str):
    if key in self._inodes: return
    self._inodes[key] = MemoryInode({ 'type': 'directory', 'size': 0, 'mtime': time.time() })
    self._dirs.setdefault(key, set())
    if key != '/':
      self._dirs.setdefault(posixpath.dirname(key), set()).add(posixpath.basename(key))

  def _touch(self, key: str):
    if key in self._inodes:
      self._inodes[key].info['mtime'] = time.time()

  def _text(self, key: str) -> str:
    if self.convention.drive_roots and key != '/':
      drive, _, rest = key[1:].partition('/')
      if drive.endswith(':'): return drive + '/' + rest
    return key

  def write(self, path: str, content: bytes = b''):
    ''' Create or overwrite a regular file, not part of the backend surface but
    needed to put files anywhere
    '''
    key = self._key(path)
    parent = posixpath.dirname(key)
    if parent not in self._dirs: raise FileNotFoundError(path)
    if key in self._dirs: raise IsADirectoryError(path)
    self._inodes[key] = MemoryInode({ 'type': 'file', 'size': len(content), 'mtime': time.time() }, content)
    self._dirs[parent].add(posixpath.basename(key))
    self._touch(parent)

  def stat(self, path):
    try: return dict(self._inodes[self._key(path)].info)
    except KeyError: raise FileNotFoundError(path)

  def opendir(self, path):
    key = self._key(path)
    if key not in self._inodes: raise FileNotFoundError(path)
    if key not in self._dirs: raise NotADirectoryError(path)
    fd = next(self._cfd)
    self._fds[fd] = MemoryDirectoryHandle(key, ['.', '..', *sorted(self._dirs[key])])
    return fd
  def readdir(self, handle):
    names = self._fds[handle].names
    return names.pop(0) if names else None
  def closedir(self, handle):
    del self._fds[handle]

  def mkdir(self, path):
    key = self._key(path)
    if key in self._inodes: raise FileExistsError(path)
    if posixpath.dirname(key) not in self._dirs: raise FileNotFoundError(path)
    self._add_dir(key)
    self._touch(posixpath.dirname(key))

  def rmdir(self, path):
    key = self._key(path)
    if key not in self._inodes: raise FileNotFoundError(path)
    if key not in self._dirs: raise NotADirectoryError(path)
    if self._dirs[key]: raise OSError(errno.ENOTEMPTY, 'Directory not empty', path)
    if key == '/': raise PermissionError(path)
    parent = posixpath.dirname(key)
    self._dirs[parent].remove(posixpath.basename(key))
    del self._dirs[key]
    del self._inodes[key]
    self._touch(parent)

  def unlink(self, path):
    key = self._key(path)
    if key not in self._inodes: raise FileNotFoundError(path)
    if key in self._dirs: raise IsADirectoryError(path)
    parent = posixpath.dirname(key)
    self._dirs[parent].remove(posixpath.basename(key))
    del self._inodes[key]
    self._touch(parent)

  def getcwd(self):
    if self._cwd not in self._dirs: raise FileNotFoundError(self._text(self._cwd))
    return self._text(self._cwd)
  def chdir(self, path):
    key = self._key(path)
    if key not in self._inodes: raise FileNotFoundError(path)
    if key not in self._dirs: raise NotADirectoryError(path)
    self._cwd = key
