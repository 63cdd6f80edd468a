''' Separator and root rules for the two path families boostfs understands.

POSIX paths use `/` and are rooted by a leading `/`.
Windows paths accept `/` and `\\`, and are rooted by a drive letter, `:` and a separator.
'''
import os
import dataclasses

@dataclasses.dataclass(frozen=True)
class PathConvention:
  name: str
  separators: str
  drive_roots: bool

  def is_slash(self, c: str) -> bool:
    return c != '' and c in self.separators

  def last_slash(self, s: str) -> int:
    ''' Index of the last separator in s, or -1
    '''
    return max(s.rfind(sep) for sep in self.separators)

  def forward_slashes(self, s: str) -> str:
    for sep in self.separators:
      if sep != '/': s = s.replace(sep, '/')
    return s

  def has_drive_root(self, s: str) -> bool:
    return self.drive_roots and len(s) >= 3 and s[0].isalpha() and s[1] == ':' and self.is_slash(s[2])

  def is_absolute(self, s: str) -> bool:
    if self.drive_roots:
      return self.has_drive_root(s)
    return self.is_slash(s[:1])

  def root_length(self, s: str) -> int:
    ''' Length of the root marker at the start of s, 0 when there is none.
    A leading separator counts as a root on both conventions so it is never stripped.
    '''
    if self.has_drive_root(s): return 3
    elif self.is_slash(s[:1]): return 1
    else: return 0

  def __str__(self) -> str:
    return self.name

POSIX = PathConvention('posix', '/', False)
WINDOWS = PathConvention('windows', '/\\', True)

def native() -> PathConvention:
  return WINDOWS if os.name == 'nt' else POSIX

def get(name: 'str | PathConvention') -> PathConvention:
  if isinstance(name, PathConvention): return name
  elif name == 'posix': return POSIX
  elif name == 'windows': return WINDOWS
  elif name == 'native': return native()
  else: raise ValueError(f"Unknown path convention {name!r}")
