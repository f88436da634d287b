"""
Model Conversion
Turns ORM models into plain dicts and lists for serialization
"""
from typing import Any, FrozenSet, Iterable, Tuple


def is_model(value: Any) -> bool:
    """
    Check whether a value can be converted like a model

    Any object with a callable to_dict() qualifies, not only
    representations.database.Model instances.
    """
    return not isinstance(value, type) and callable(getattr(value, 'to_dict', None))


def model_properties(model: Any) -> Iterable[Tuple[str, Any]]:
    """
    Enumerate a model's properties

    Uses the model's own iter_properties() when it has one, otherwise
    its public instance attributes.
    """
    iter_properties = getattr(model, 'iter_properties', None)
    if callable(iter_properties):
        return iter_properties()

    return [
        (key, value)
        for key, value in vars(model).items()
        if not key.startswith('_')
    ]


def models_to_array(data: Any) -> Any:
    """
    Convert ORM models to dicts so the result is well formed native JSON

    - A model becomes model.to_dict() overlaid with its converted properties
    - A list or tuple whose FIRST element is a model becomes a list of dicts
    - Everything else is returned unchanged

    Only the first element of a sequence is inspected: a sequence that
    starts with something other than a model is left alone even when
    later elements are models.

    Example:
        await user.fetch_related('posts')
        models_to_array(user)     # {'id': 1, 'email': ..., 'posts': [{'id': 3, ...}]}
        models_to_array([user])   # [{'id': 1, ...}]
    """
    return _convert(data, frozenset())


def _convert(data: Any, path: FrozenSet[int]) -> Any:
    if isinstance(data, (list, tuple)):
        if data and is_model(data[0]):
            return [_convert(item, path) for item in data]
        return data

    if is_model(data):
        return _convert_model(data, path)

    return data


def _convert_model(model: Any, path: FrozenSet[int]) -> Any:
    converted_model = dict(model.to_dict())

    # A relation pointing back at a model being converted stops here
    if id(model) in path:
        return converted_model

    path = path | {id(model)}
    for key, value in model_properties(model):
        converted_model[key] = _convert(value, path)

    return converted_model
