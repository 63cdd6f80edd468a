''' shutil-style recursive removal through the active backend
'''
import typing as t
import logging
import dataclasses
from boostfs import context
from boostfs.os import is_directory, remove
from boostfs.path import Path, PathLike
from boostfs.iterator import DirectoryIterator

logger = logging.getLogger(__name__)

@dataclasses.dataclass
class Frame:
  path: Path
  iterator: t.Optional[DirectoryIterator] = None

def remove_all(p: PathLike) -> bool:
  ''' Remove a file, or a directory and everything beneath it, bottom-up.

  The tree is walked with an explicit stack rather than recursion so depth is bounded
  by memory, not by the interpreter's recursion limit. A subdirectory's frame only
  opens its handle once it reaches the top of the stack, so at most one directory
  handle is held at any time.

  The first failed deletion aborts the whole operation and returns False, leaving
  whatever has not been deleted yet in place.
  '''
  p = Path(p)
  if not is_directory(p):
    try:
      context.get_fs().unlink(p.string())
    except OSError as e:
      logger.debug(f"remove_all({p.string()!r}) failed with {e!r}")
      return False
    else:
      return True

  end = DirectoryIterator()
  stack = [Frame(p)]
  try:
    while stack:
      frame = stack[-1]
      if frame.iterator is None:
        frame.iterator = DirectoryIterator(frame.path)
      subdirs = []
      while frame.iterator != end:
        child = frame.iterator.entry.path
        frame.iterator.advance()
        if child.filename().string() in ('.', '..'):
          continue
        if is_directory(child):
          subdirs.append(Frame(child))
        elif not remove(child):
          logger.warning(f"remove_all({p.string()!r}) aborted, could not remove {child.string()!r}")
          return False
      if subdirs:
        stack += subdirs
      else:
        if not remove(frame.path):
          logger.warning(f"remove_all({p.string()!r}) aborted, could not remove {frame.path.string()!r}")
          return False
        stack.pop()
  except OSError as e:
    logger.warning(f"remove_all({p.string()!r}) aborted, {e}")
    return False
  finally:
    for frame in stack:
      if frame.iterator is not None:
        frame.iterator.close()
  return True
