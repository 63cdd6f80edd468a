''' A textual path value and its resolution to absolute, canonical form
'''
import os
import typing as t
from boostfs import context
from boostfs.errors import ResolutionError, reraise

PathLike: t.TypeAlias = 'str | os.PathLike[str] | Path'

class Path:
  ''' A filesystem path kept as the exact text it was built from.

  Nothing is cached or normalized: every accessor works on the raw text using the
  active backend's path convention. Equality compares canonical forms, so two
  differently spelled paths naming the same location are equal.
  '''
  __slots__ = ('_s',)

  def __init__(self, s: PathLike = ''):
    if isinstance(s, Path): s = s._s
    self._s = os.fsdecode(s)

  # composition
  def concat(self, other: PathLike) -> 'Path':
    return Path(self._s + Path(other)._s)

  def compose(self, other: PathLike) -> 'Path':
    ''' Join with exactly one separator, unless self already ends in one
    '''
    if not self._s:
      raise ValueError('Cannot compose onto an empty path')
    if context.convention().is_slash(self._s[-1]):
      return self.concat(other)
    return Path(self._s + '/' + Path(other)._s)

  def __add__(self, other: PathLike) -> 'Path':
    if not isinstance(other, (str, os.PathLike)): return NotImplemented
    return self.concat(other)

  def __radd__(self, other: PathLike) -> 'Path':
    if not isinstance(other, (str, os.PathLike)): return NotImplemented
    return Path(other).concat(self)

  def __truediv__(self, other: PathLike) -> 'Path':
    if not isinstance(other, (str, os.PathLike)): return NotImplemented
    return self.compose(other)

  def __rtruediv__(self, other: PathLike) -> 'Path':
    if not isinstance(other, (str, os.PathLike)): return NotImplemented
    return Path(other).compose(self)

  # comparison
  def equals(self, other: PathLike) -> bool:
    return canonical(self)._s == canonical(other)._s

  def __eq__(self, other) -> bool:
    if not isinstance(other, (str, os.PathLike)): return NotImplemented
    return self.equals(other)

  def __ne__(self, other) -> bool:
    if not isinstance(other, (str, os.PathLike)): return NotImplemented
    return not self.equals(other)

  def __hash__(self) -> int:
    return hash(canonical(self)._s)

  # decomposition
  def filename(self) -> 'Path':
    i = context.convention().last_slash(self._s)
    if i == -1: return self
    return Path(self._s[i+1:])

  def _last_dot(self) -> int:
    ''' Index of the last `.` within the final segment, or -1
    '''
    i = self._s.rfind('.')
    if i < context.convention().last_slash(self._s): return -1
    return i

  def extension(self) -> 'Path':
    i = self._last_dot()
    if i == -1: return Path()
    return Path(self._s[i:])

  def stem(self) -> 'Path':
    ''' Everything before the extension, leading directories included
    '''
    i = self._last_dot()
    if i == -1: return self
    return Path(self._s[:i])

  def parent_path(self) -> 'Path':
    conv = context.convention()
    i = conv.last_slash(self._s)
    if i == -1: return Path()
    root = conv.root_length(self._s)
    if i < root: return Path(self._s[:root])
    return Path(self._s[:i])

  def replace_extension(self, new_ext: PathLike = '') -> 'Path':
    new_ext = Path(new_ext)._s
    s = self.stem()._s
    if new_ext and not new_ext.startswith('.'):
      s += '.'
    return Path(s + new_ext)

  # accessors
  def empty(self) -> bool:
    return not self._s

  def size(self) -> int:
    return len(self._s)

  def string(self) -> str:
    return self._s

  def c_str(self) -> bytes:
    ''' The encoded path with a trailing NUL, as C APIs expect it
    '''
    return os.fsencode(self._s) + b'\0'

  def __len__(self) -> int:
    return len(self._s)

  def __bool__(self) -> bool:
    return bool(self._s)

  def __fspath__(self) -> str:
    return self._s

  def __str__(self) -> str:
    return self._s

  def __repr__(self) -> str:
    return f"Path({self._s!r})"

path = Path

def extension(p: PathLike) -> Path:
  return Path(p).extension()

def complete(p: PathLike) -> Path:
  ''' Make p absolute against the backend's current working directory
  '''
  p = Path(p)
  if context.convention().is_absolute(p.string()):
    return p
  fs = context.get_fs()
  with reraise(ResolutionError, 'Could not obtain current working directory'):
    cwd = Path(fs.getcwd())
  if p.empty(): return cwd
  return cwd / p

def canonical(p: PathLike) -> Path:
  ''' Absolute form of p with forward slashes, and without empty or `.` segments.

  `..` segments are left in place: resolving them needs knowledge of symlinks
  which a textual operation doesn't have.
  '''
  s = context.convention().forward_slashes(complete(p).string())
  root = context.convention().root_length(s)
  pos = max(root, 1)
  while pos < len(s):
    if s[pos] == '/' and s[pos-1] == '/':
      # //
      s = s[:pos] + s[pos+1:]
    elif s[pos] == '.' and s[pos-1] == '/' and pos+1 < len(s) and s[pos+1] == '/':
      # /./
      s = s[:pos] + s[pos+2:]
    elif s[pos] == '.' and s[pos-1] == '/' and pos+1 == len(s):
      # trailing /.
      s = s[:pos-1] if pos-1 >= root else s[:pos]
    else:
      pos += 1
  return Path(s)
