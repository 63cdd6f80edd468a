''' Queries and single-step mutations of the filesystem through the active backend
'''
import typing as t
import logging
from boostfs import context
from boostfs.path import Path, PathLike
from boostfs.errors import NavigationError, ResolutionError, StatError, reraise

logger = logging.getLogger(__name__)

def _lstat(p: PathLike):
  try:
    return context.get_fs().lstat(Path(p).string())
  except OSError:
    return None

def exists(p: PathLike) -> bool:
  ''' Whether p can be stat'ed, a dangling symlink counts as existing
  '''
  return _lstat(p) is not None

def is_regular_file(p: PathLike) -> bool:
  info = _lstat(p)
  return info is not None and info['type'] == 'file'

def is_directory(p: PathLike) -> bool:
  info = _lstat(p)
  return info is not None and info['type'] == 'directory'

def last_write_time(p: PathLike) -> float:
  p = Path(p)
  with reraise(StatError, f"Cannot stat {p}", p):
    return context.get_fs().stat(p.string())['mtime']

def create_directory(p: PathLike) -> None:
  ''' Best-effort mkdir, an existing directory (or any other failure) is not an error
  '''
  try:
    context.get_fs().mkdir(Path(p).string())
  except OSError as e:
    logger.debug(f"create_directory({str(p)!r}) ignored {e!r}")

def remove(p: PathLike) -> bool:
  ''' Remove a file or an empty directory, reporting success
  '''
  p = Path(p)
  fs = context.get_fs()
  try:
    if is_directory(p):
      fs.rmdir(p.string())
    else:
      fs.unlink(p.string())
  except OSError as e:
    logger.debug(f"remove({p.string()!r}) failed with {e!r}")
    return False
  else:
    return True

@t.overload
def current_path() -> Path: ...
@t.overload
def current_path(p: PathLike) -> None: ...
def current_path(p: t.Optional[PathLike] = None) -> t.Optional[Path]:
  ''' Without arguments, the current working directory. With one, change to it.

  The working directory is process-wide, see `boostfs.context`.
  '''
  fs = context.get_fs()
  if p is None:
    with reraise(ResolutionError, 'Cannot retrieve current directory'):
      return Path(fs.getcwd())
  p = Path(p)
  with reraise(NavigationError, f"Cannot change to directory {p}", p):
    fs.chdir(p.string())
