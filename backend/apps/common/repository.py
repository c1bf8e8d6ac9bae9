from typing import Generic, Iterable, Optional, Type, TypeVar

from django.db import models

T = TypeVar("T", bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin data-access wrapper around a model's default manager.

    Services only ever talk to repositories, so every read and every write
    is an explicit call: ``get`` loads, callers mutate the instance in
    memory, ``save`` persists it.
    """

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def list(self, **filters) -> Iterable[T]:
        return self.model.objects.filter(**filters)

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def save(self, obj: T, update_fields: Optional[Iterable[str]] = None) -> T:
        if update_fields is not None:
            obj.save(update_fields=list(update_fields))
        else:
            obj.save()
        return obj

    def delete(self, obj: T) -> None:
        obj.delete()
