def fs():
  from boostfs.impl.logger import Logger
  from boostfs.impl.memory import Memory
  with Logger(Memory(cwd='/scratch')) as fs:
    yield fs
