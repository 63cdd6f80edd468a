''' The host operating system's filesystem
'''
import os
import stat
import itertools
from boostfs.spec import FS, FileStat

def stat_result_to_info(info: os.stat_result) -> FileStat:
  if stat.S_ISDIR(info.st_mode):
    type = 'directory'
  elif stat.S_ISREG(info.st_mode):
    type = 'file'
  else:
    type = 'other'
  return {
    'type': type,
    'size': info.st_size,
    'mtime': info.st_mtime,
  }

class Local(FS):
  def __init__(self, convention = None):
    super().__init__(convention)
    self._cfd = iter(itertools.count(start=5))
    self._fds = {}

  def stat(self, path):
    return stat_result_to_info(os.stat(path))
  def lstat(self, path):
    return stat_result_to_info(os.lstat(path))

  def opendir(self, path):
    # os.scandir hides . and .. so they are put back in front
    scandir = os.scandir(path)
    fd = next(self._cfd)
    self._fds[fd] = (scandir, itertools.chain(['.', '..'], (entry.name for entry in scandir)))
    return fd
  def readdir(self, handle):
    return next(self._fds[handle][1], None)
  def closedir(self, handle):
    scandir, _ = self._fds.pop(handle)
    scandir.close()

  def mkdir(self, path):
    os.mkdir(path, 0o755)
  def rmdir(self, path):
    os.rmdir(path)
  def unlink(self, path):
    os.unlink(path)

  def getcwd(self):
    return os.getcwd()
  def chdir(self, path):
    os.chdir(path)
