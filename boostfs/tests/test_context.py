import json
import logging
from boostfs import context
from boostfs.spec import FS
from boostfs.impl.local import Local
from boostfs.impl.logger import Logger
from boostfs.impl.memory import Memory
from boostfs.os import current_path
from boostfs.utils.convention import POSIX, WINDOWS

def test_use():
  outer, inner = Memory(cwd='/outer'), Memory(cwd='/inner')
  with context.use(outer):
    assert context.get_fs() is outer
    with context.use(inner):
      assert context.get_fs() is inner
      assert current_path().string() == '/inner'
    assert context.get_fs() is outer
    assert current_path().string() == '/outer'

def test_set_fs():
  memory = Memory()
  previous = context.set_fs(memory)
  try:
    assert context.get_fs() is memory
    assert context.convention() is POSIX
  finally:
    assert context.set_fs(previous) is memory

def test_from_env(monkeypatch):
  monkeypatch.setenv('BOOSTFS_SPEC', json.dumps(dict(cls='boostfs.impl.memory.Memory', convention='windows', cwd='C:/work')))
  previous = context.set_fs(None)
  try:
    fs = context.get_fs()
    assert isinstance(fs, Memory)
    assert context.convention() is WINDOWS
    assert current_path().string() == 'C:/work'
  finally:
    context.set_fs(previous)

def test_default_is_local(monkeypatch):
  monkeypatch.delenv('BOOSTFS_SPEC', raising=False)
  previous = context.set_fs(None)
  try:
    assert isinstance(context.get_fs(), Local)
  finally:
    context.set_fs(previous)

def test_dict_config():
  fs = Logger(Memory(WINDOWS, cwd='D:/x'), level=logging.INFO)
  spec = json.loads(json.dumps(fs.to_dict()))
  assert spec == dict(
    cls='boostfs.impl.logger.Logger',
    convention='windows',
    level=logging.INFO,
    fs=dict(cls='boostfs.impl.memory.Memory', convention='windows', cwd='D:/x'),
  )
  fs = FS.from_dict(**spec)
  assert isinstance(fs, Logger)
  assert fs.convention is WINDOWS
  assert fs.getcwd() == 'D:/x'
