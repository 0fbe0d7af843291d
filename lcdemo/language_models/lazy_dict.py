"""
The utility class `LazyLoadingDict` stores memoized objects produced
by a factory function, such as the language model clients created
from a settings object, or the prompt definitions created from a
prompt name.

The dictionary is instantiated by providing the factory function in
the constructor. The factory takes one argument of the type of the
dictionary key and returns the value stored under that key. Objects
are created the first time the key is accessed, and retrieved from
the cache afterwards. Invalid keys are rejected by raising in the
factory function.

Example:
    ```python
    from lcdemo.config import LanguageModelSettings

    def _create_model(settings: LanguageModelSettings) -> BaseChatModel:
        match settings.get_model_source():
            case "Anthropic":
                return ChatAnthropic(model_name=settings.get_model_name())
            case _:
                raise ValueError("Unsupported source")

    models = LazyLoadingDict(_create_model)
    model = models[LanguageModelSettings(model="Anthropic/claude-haiku")]
    ```

Keys must be hashable: pydantic models used as keys should be frozen.
"""

from collections.abc import Callable
from typing import TypeVar

# ValueT is the parameter for the stored valued, KeyT for the keys.
ValueT = TypeVar('ValueT')
KeyT = TypeVar('KeyT')


class LazyLoadingDict(dict[KeyT, ValueT]):
    """A lazy dictionary class with memoized objects of type ValueT,
    created by the factory function given in the constructor.

    Direct assignment bypasses the factory function, but an existing
    key may not be overwritten without deleting it first.

    Expected behaviour: may raise ValidationError and ValueErrors.
    """

    def __init__(self, key_creator_func: Callable[[KeyT], ValueT]):
        super().__init__()
        self._key_creator_func = key_creator_func

    def __getitem__(self, key: KeyT) -> ValueT:
        if key in self:
            return super().__getitem__(key)

        value: ValueT = self._key_creator_func(key)
        super().__setitem__(key, value)
        return value

    def __setitem__(self, key: KeyT, value: ValueT) -> None:
        """Allow direct setting of key/value pairs.

        Raises:
            ValueError: If the key already exists in the dictionary.
        """
        if key in self:
            raise ValueError(
                f"Key '{key}' already exists. Delete it first to overwrite."
            )
        super().__setitem__(key, value)
