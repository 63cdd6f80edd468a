import os
import pytest
from boostfs.impl.local import Local
from boostfs.os import create_directory, exists, is_directory, is_regular_file
from boostfs.shutil import remove_all

from boostfs.tests.fixtures import touch
from boostfs.tests.fixtures.local import fs as local_fs

@pytest.fixture
def local():
  from boostfs import context
  for fs in local_fs():
    with context.use(fs):
      yield fs

@pytest.mark.skipif(not hasattr(os, 'symlink') or os.name == 'nt', reason='needs posix symlinks')
def test_symlinks_are_not_followed(local: Local):
  create_directory('target')
  touch(local, 'target/f')
  os.symlink('target', 'link')
  os.symlink('missing', 'dangling')
  assert exists('dangling')
  assert not is_regular_file('dangling')
  assert not is_directory('link')
  create_directory('tree')
  os.symlink('../target', 'tree/link')
  assert remove_all('tree')
  assert not exists('tree')
  assert is_regular_file('target/f')
  assert remove_all('link')
  assert remove_all('dangling')
  assert not exists('dangling')
  assert is_directory('target')
