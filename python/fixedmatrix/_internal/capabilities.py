from __future__ import annotations

import abc
from typing import Any, Generic, Iterator, TypeVar


T = TypeVar("T")


class MatrixOperations(Generic[T], metaclass=abc.ABCMeta):
    """Minimal capability set of a fixed-size matrix.

    A fixed matrix cannot add or remove elements; it can only get and set them.
    """

    @property
    @abc.abstractmethod
    def rows_count(self) -> int: ...

    @property
    @abc.abstractmethod
    def columns_count(self) -> int: ...

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows_count, self.columns_count)

    @abc.abstractmethod
    def rows(self, row: int) -> list[T]: ...

    @abc.abstractmethod
    def columns(self, col: int) -> list[T]: ...

    @abc.abstractmethod
    def get(self, row: int, col: int) -> T: ...

    @abc.abstractmethod
    def set(self, row: int, col: int, value: T) -> None: ...

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...


class MatrixOpsAdvance(MatrixOperations[T]):
    """Arithmetic capability set.

    Declared only: nothing in fixedmatrix implements it, and the result
    contract of each operation is undefined.
    """

    @abc.abstractmethod
    def plus(self, matrix: Any) -> Any: ...

    @abc.abstractmethod
    def minus(self, matrix: Any) -> Any: ...

    @abc.abstractmethod
    def cross(self, matrix: Any) -> Any: ...

    @abc.abstractmethod
    def dot(self, matrix: Any) -> Any: ...

    @abc.abstractmethod
    def transpose(self, matrix: Any) -> Any: ...

    @abc.abstractmethod
    def inverse(self, matrix: Any) -> Any: ...
