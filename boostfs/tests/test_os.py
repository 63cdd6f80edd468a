import pytest
from boostfs.spec import FS
from boostfs.path import Path, complete
from boostfs.os import create_directory, current_path, exists, is_directory, is_regular_file, last_write_time, remove
from boostfs import context
from boostfs.impl.memory import Memory
from boostfs.errors import NavigationError, ResolutionError, StatError

from boostfs.tests.fixtures import fs, touch
def test_queries(fs: FS):
  create_directory('d')
  touch(fs, 'd/f.txt')
  assert exists('d') and exists('d/f.txt')
  assert is_directory('d') and not is_regular_file('d')
  assert is_regular_file('d/f.txt') and not is_directory('d/f.txt')
  assert is_regular_file(Path('d') / 'f.txt')
  assert not exists('missing')
  assert not is_directory('missing')
  assert not is_regular_file('missing')

def test_create_directory_is_best_effort(fs: FS):
  create_directory('d')
  create_directory('d')
  create_directory('missing/d')
  assert is_directory('d')
  assert not exists('missing')

def test_last_write_time(fs: FS):
  touch(fs, 'f')
  assert last_write_time('f') == fs.stat('f')['mtime']
  with pytest.raises(StatError) as exc: last_write_time('missing')
  assert isinstance(exc.value, OSError)
  assert exc.value.filename == 'missing'

def test_current_path(fs: FS):
  cwd = current_path()
  assert cwd == complete('')
  create_directory('d')
  current_path('d')
  assert current_path() == cwd / 'd'
  assert is_directory(cwd / 'd')
  current_path(cwd)
  assert current_path() == cwd
  with pytest.raises(NavigationError): current_path('missing')
  assert current_path() == cwd

def test_remove(fs: FS):
  create_directory('d')
  touch(fs, 'd/f')
  assert not remove('d')
  assert remove('d/f')
  assert not exists('d/f')
  assert remove('d')
  assert not exists('d')
  assert not remove('d')

def test_current_path_of_removed_directory():
  memory = Memory(cwd='/scratch')
  with context.use(memory):
    memory.rmdir('/scratch')
    with pytest.raises(ResolutionError): current_path()

def test_empty_path_does_not_exist(fs: FS):
  assert not exists('')
  assert not is_directory('')
  assert not is_regular_file('')
