''' A backend wrapper for logging.
This logs all operations it passes through to the underlying backend.

Usage:
fs = Logger(Local())
'''

import logging
import traceback
from boostfs.spec import FS

logger = logging.getLogger(__name__)

class Logger(FS):
  def __init__(self, fs: FS, level: int = logging.DEBUG):
    super().__init__(fs.convention)
    self._fs = fs
    self._level = level
    self._logger = logger.getChild(self._fs.__class__.__name__)
    self._logger.log(self._level, repr(self._fs))

  @staticmethod
  def from_dict(*, fs, level = logging.DEBUG, convention = None):
    return Logger(
      fs=FS.from_dict(**fs),
      level=level,
    )

  def to_dict(self):
    return dict(super().to_dict(),
      fs=self._fs.to_dict(),
      level=self._level,
    )

  def _call(self, op, *args, **kwargs):
    method = f"{op}({', '.join([*[repr(arg) for arg in args], *[key + '=' + repr(value) for key, value in kwargs.items()]])})"
    try:
      ret = getattr(self._fs, op)(*args, **kwargs)
      self._logger.log(self._level, f"{method} -> {ret!r}")
      return ret
    except Exception as e:
      self._logger.error(f"{method} raised {traceback.format_exc()}")
      raise e

  def stat(self, path):
    return self._call('stat', path)
  def lstat(self, path):
    return self._call('lstat', path)

  def opendir(self, path):
    return self._call('opendir', path)
  def readdir(self, handle):
    return self._call('readdir', handle)
  def closedir(self, handle):
    return self._call('closedir', handle)

  def mkdir(self, path):
    return self._call('mkdir', path)
  def rmdir(self, path):
    return self._call('rmdir', path)
  def unlink(self, path):
    return self._call('unlink', path)

  def getcwd(self):
    return self._call('getcwd')
  def chdir(self, path):
    return self._call('chdir', path)

  def start(self):
    return self._call('start')
  def stop(self):
    return self._call('stop')
