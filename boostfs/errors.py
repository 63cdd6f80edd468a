''' Exceptions raised by operations which have no sensible non-exceptional result
'''
import os
import errno
import typing as t
import logging
import contextlib

logger = logging.getLogger(__name__)

class FilesystemError(OSError):
  ''' Base class, an OSError carrying the errno of the backend failure when there was one
  '''
  default_errno = errno.EIO

  def __init__(self, message: str, path: t.Optional[str] = None, errno_: t.Optional[int] = None):
    super().__init__(self.default_errno if errno_ is None else errno_, message, path)

class ResolutionError(FilesystemError):
  ''' The current working directory could not be obtained '''
  default_errno = errno.ENOENT

class OpenError(FilesystemError):
  ''' A directory could not be opened for iteration '''
  default_errno = errno.ENOTDIR

class NavigationError(FilesystemError):
  ''' The current working directory could not be changed '''
  default_errno = errno.ENOENT

class StatError(FilesystemError):
  ''' A path which must exist could not be stat'ed '''
  default_errno = errno.ENOENT

@contextlib.contextmanager
def reraise(cls: t.Type[FilesystemError], message: str, path: t.Optional[os.PathLike] = None):
  ''' Translate backend failures inside the block into `cls`
  '''
  try:
    yield
  except FilesystemError: raise
  except OSError as e:
    logger.debug(f"{message}: {e!r}")
    raise cls(message, None if path is None else os.fspath(path), e.errno) from e
  except NotImplementedError as e:
    raise cls(message, None if path is None else os.fspath(path), errno.ENOTSUP) from e
