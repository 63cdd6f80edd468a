import pytest
import pathlib

@pytest.fixture(params=[
  p.stem
  for p in pathlib.Path(__file__).parent.glob('[!_]*.py')
])
def fs(request):
  ''' Load different backends from fixtures directory to be tested uniformly,
  each one installed as the active backend with a scratch working directory
  '''
  import importlib
  from boostfs import context
  for fs in importlib.import_module(f"boostfs.tests.fixtures.{request.param}").fs():
    with context.use(fs):
      yield fs

def touch(fs, path):
  ''' Create an empty regular file, the backend surface has no way to do that
  '''
  from boostfs.path import complete
  from boostfs.impl.logger import Logger
  from boostfs.impl.memory import Memory
  while isinstance(fs, Logger): fs = fs._fs
  if isinstance(fs, Memory):
    fs.write(str(path))
  else:
    with open(complete(path).string(), 'w'):
      pass
