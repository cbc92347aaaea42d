# app/core/exceptions.py
from typing import Any


class NotFoundError(Exception):
    def __init__(self, entity: str, id: Any):
        self.entity = entity
        self.id = id
        super().__init__(f"No such {entity}: {id}")


class EmptySearchQueryError(ValueError):
    pass
