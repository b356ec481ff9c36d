from typing import NewType

SystemId = NewType('SystemId', str)
