# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel, ConfigDict

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for geometric value types.

    Subclasses are frozen after creation and compared by value. Copies with
    modified fields go through full validation again, so any invariant a
    subclass enforces at construction also holds for its copies.
    """
    model_config = ConfigDict(frozen=True)

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a re-validated copy with some fields replaced.

        Args:
            **changes: Field names mapped to their new values

        Returns:
            New instance of the same class

        Raises:
            ValueError: If an unknown field name is given
        """
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Invalid field: {', '.join(sorted(unknown))}")

        # Shallow field copy keeps nested models as instances
        current_data = {name: getattr(self, name) for name in type(self).model_fields}
        current_data.update(changes)

        return cast(T, type(self).model_validate(current_data))
