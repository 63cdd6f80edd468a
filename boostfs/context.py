''' The process-wide backend boostfs operates on.

There is exactly one active backend per process, held in a module-level cell,
and it owns the notion of a current working directory. Nothing here is
synchronized: changing the backend or its working directory from one thread
while another resolves relative paths is a race the caller has to prevent.

The initial backend is described by the `BOOSTFS_SPEC` environment variable, e.g.
BOOSTFS_SPEC='{"cls": "boostfs.impl.memory.Memory"}', and defaults to `Local()`.
'''
import os
import json
import typing as t
import logging
import contextlib
from boostfs.spec import FS
from boostfs.utils.convention import PathConvention

logger = logging.getLogger(__name__)

_fs: t.Optional[FS] = None

def _from_env() -> FS:
  spec = os.environ.get('BOOSTFS_SPEC')
  if spec:
    fs = FS.from_dict(**json.loads(spec))
  else:
    from boostfs.impl.local import Local
    fs = Local()
  logger.debug(f"initialized {fs!r}")
  return fs

def get_fs() -> FS:
  global _fs
  if _fs is None:
    _fs = _from_env()
  return _fs

def set_fs(fs: t.Optional[FS]) -> t.Optional[FS]:
  ''' Install fs as the active backend and return the previous one.
  None resets to the environment default on next use.
  '''
  global _fs
  previous, _fs = _fs, fs
  return previous

@contextlib.contextmanager
def use(fs: FS):
  previous = set_fs(fs)
  try:
    yield fs
  finally:
    set_fs(previous)

def convention() -> PathConvention:
  return get_fs().convention
