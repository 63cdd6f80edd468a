''' Compatibility with fsspec filesystems

fsspec has no working directory so this backend keeps one, relative paths
are joined to it before reaching the filesystem.

Usage:
from fsspec.implementations.local import LocalFileSystem
fs = FSSpec(LocalFileSystem(), cwd='/tmp')
'''
import json
import time
import fsspec
import posixpath
import itertools
from datetime import datetime
from boostfs.spec import FS, FileStat
from boostfs.utils.convention import POSIX

def fsspec_info_to_info(info) -> FileStat:
  mtime = info.get('mtime', info.get('modified', info.get('LastModified', time.time())))
  if isinstance(mtime, datetime): mtime = mtime.timestamp()
  return {
    'type': info['type'] if info['type'] in ('file', 'directory') else 'other',
    'size': info.get('size') or 0,
    'mtime': mtime,
  }

class FSSpec(FS):
  def __init__(self, fs: fsspec.AbstractFileSystem, cwd: str = None, convention = POSIX):
    super().__init__(convention)
    self._fs = fs
    self._cwd = cwd or fs.root_marker or '/'
    self._cfd = iter(itertools.count(start=5))
    self._fds = {}

  @staticmethod
  def from_dict(*, fs, cwd = None, convention = POSIX):
    return FSSpec(
      fs=fsspec.AbstractFileSystem.from_json(json.dumps(fs)),
      cwd=cwd,
      convention=convention,
    )

  def to_dict(self):
    return dict(super().to_dict(),
      fs=json.loads(self._fs.to_json()),
      cwd=self._cwd,
    )

  def _path(self, path: str) -> str:
    if not path: raise FileNotFoundError(path)
    return posixpath.join(self._cwd, self.convention.forward_slashes(path))

  def stat(self, path):
    return fsspec_info_to_info(self._fs.info(self._path(path)))
  def lstat(self, path):
    info = self._fs.info(self._path(path))
    if info.get('islink'): return dict(fsspec_info_to_info(info), type='other')
    return fsspec_info_to_info(info)

  def opendir(self, path):
    path = self._path(path)
    if self._fs.info(path)['type'] != 'directory': raise NotADirectoryError(path)
    names = [posixpath.basename(name.rstrip('/')) for name in self._fs.ls(path, detail=False)]
    fd = next(self._cfd)
    self._fds[fd] = iter(['.', '..', *names])
    return fd
  def readdir(self, handle):
    return next(self._fds[handle], None)
  def closedir(self, handle):
    del self._fds[handle]

  def mkdir(self, path):
    self._fs.mkdir(self._path(path), create_parents=False)
  def rmdir(self, path):
    self._fs.rmdir(self._path(path))
  def unlink(self, path):
    path = self._path(path)
    if self._fs.info(path)['type'] == 'directory': raise IsADirectoryError(path)
    self._fs.rm_file(path)

  def getcwd(self):
    return self._cwd
  def chdir(self, path):
    path = self._path(path)
    if self._fs.info(path)['type'] != 'directory': raise NotADirectoryError(path)
    self._cwd = path
