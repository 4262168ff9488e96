# registers.py

import logging
from typing import Dict, Iterator

from mainmat.matrix import Matrix
from mainmat.tables import REGISTER_NAMES

logger = logging.getLogger(__name__)


class RegisterFile:
    """
    The six named matrix registers, MAT_A to MAT_F.

    Every register starts as the zero matrix and always holds a complete matrix.
    Handlers write a register only once a command has passed all of its checks.
    """

    def __init__(self):
        self._slots: Dict[str, Matrix] = {name: Matrix.zeros() for name in REGISTER_NAMES}

    def __getitem__(self, name: str) -> Matrix:
        return self._slots[name]

    def __setitem__(self, name: str, value: Matrix) -> None:
        if name not in self._slots:
            raise KeyError(name)
        if not isinstance(value, Matrix):
            raise TypeError(f"Register {name} can only hold a Matrix")
        logger.debug(f"Register {name} updated")
        self._slots[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
