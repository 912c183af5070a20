"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")


class BaseUseCase(ABC, Generic[RequestT, ResultT]):
    """One user-facing operation.

    Use cases take a request model, call domain services and return a
    result model. They never touch repositories directly.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResultT: ...
