"""
Base Model
Tortoise base model that knows how to present itself to representations
"""
from tortoise.models import Model as TortoiseModel
from typing import Optional, List, Dict, Any, Iterator, Tuple
from datetime import datetime
import json


class Model(TortoiseModel):
    """
    Laravel-style base model class with serialization helpers

    Application models should inherit from this class instead of
    Tortoise's Model directly so models_to_array() can convert them
    together with their fetched relations.

    Examples:
        # Laravel-style hidden fields
        class User(Model):
            hidden = ['password_hash', 'secret_key']

        # Laravel-style casts
        class User(Model):
            casts = {
                'is_active': 'bool',
                'metadata': 'json',
                'created_at': 'datetime'
            }

        # Serialize with fetched relations
        await user.fetch_related('posts')
        data = models_to_array(user)
    """

    hidden: List[str] = []  # Fields to hide in serialization
    casts: Dict[str, str] = {}  # Field type casting

    class Meta:
        abstract = True

    # ====================
    # Serialization
    # ====================

    def to_dict(self, exclude: Optional[List[str]] = None, include_hidden: bool = False) -> Dict[str, Any]:
        """
        Convert model columns to dictionary (respects Laravel-style 'hidden' attribute)

        Relations are not included, see iter_properties().

        Args:
            exclude: Additional fields to exclude
            include_hidden: If True, include fields marked as hidden (default: False)

        Returns:
            Dictionary representation

        Example:
            data = user.to_dict()  # Excludes fields in user.hidden
            data = user.to_dict(exclude=['email'])  # Also excludes email
        """
        exclude = list(exclude or [])

        if not include_hidden:
            exclude.extend(getattr(self.__class__, 'hidden', []))

        casts = getattr(self.__class__, 'casts', {})
        data = {}

        for field in self._meta.fields_db_projection.keys():
            if field in exclude:
                continue

            value = getattr(self, field, None)

            if field in casts:
                value = self._cast_attribute(value, casts[field])
            elif isinstance(value, datetime):
                value = value.isoformat()

            data[field] = value

        return data

    def iter_properties(self) -> Iterator[Tuple[str, Any]]:
        """
        Iterate the serialized columns followed by every fetched relation

        Relations that were not fetched (fetch_related / prefetch_related)
        are skipped, so no query is ever issued from here.

        Example:
            await post.fetch_related('author', 'comments')
            dict(post.iter_properties())  # {..., 'author': <User>, 'comments': [<Comment>, ...]}
        """
        hidden = getattr(self.__class__, 'hidden', [])

        yield from self.to_dict().items()

        for name in self._meta.fetch_fields:
            if name in hidden:
                continue

            related = self._fetched_relation(name)
            if related is not None:
                yield name, related

    def _fetched_relation(self, name: str) -> Any:
        """Fetched value of a relation, or None when it wasn't fetched"""
        meta = self._meta
        if name in meta.fk_fields or name in meta.o2o_fields or name in meta.backward_o2o_fields:
            # Tortoise caches single related objects on "_<name>", unfetched
            # backward one-to-one access leaves a QuerySet there
            related = getattr(self, f'_{name}', None)
            return related if isinstance(related, TortoiseModel) else None

        relation = getattr(self, name, None)
        if getattr(relation, '_fetched', False):
            return list(relation.related_objects)

        return None

    def _cast_attribute(self, value: Any, cast_type: str) -> Any:
        """
        Cast attribute to specified type (Laravel-style casting)

        Args:
            value: Field value
            cast_type: Type to cast to ('bool', 'int', 'float', 'string', 'json', 'datetime')

        Returns:
            Casted value
        """
        if value is None:
            return None

        cast_type = cast_type.lower()

        if cast_type in ('bool', 'boolean'):
            return bool(value)
        elif cast_type in ('int', 'integer'):
            return int(value)
        elif cast_type in ('float', 'double'):
            return float(value)
        elif cast_type in ('string', 'str'):
            return str(value)
        elif cast_type == 'json':
            # If already dict/list, return as-is; if string, parse it
            return json.loads(value) if isinstance(value, str) else value
        elif cast_type == 'datetime':
            return value.isoformat() if isinstance(value, datetime) else value

        return value

    def to_json(self, exclude: Optional[List[str]] = None, indent: Optional[int] = None) -> str:
        """
        Convert model to JSON string

        Example:
            json_str = user.to_json(exclude=['password_hash'])
        """
        return json.dumps(self.to_dict(exclude=exclude), indent=indent, default=str)

    def __repr__(self) -> str:
        if hasattr(self, 'id'):
            return f"<{self.__class__.__name__} id={self.id}>"
        return f"<{self.__class__.__name__}>"
