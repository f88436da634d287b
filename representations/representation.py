"""
Representation
Managing your resource representations

A representation binds a data mapping to a Python file found under the
representations folder. The file runs with every data key available as
a variable and the value of its last expression is the output:

    # views/representations/user.py
    {
        'id': user.id,
        'greeting': 'Hello, ' + user.name,
    }

    # controller
    data = Representation.forge('user', {'user': user}).output()

Mappings are returned as they are, so a file that puts models inside a
dict or list of its own converts them itself:

    # views/representations/users/index.py
    from representations import models_to_array

    {'users': models_to_array(users)}
"""
import ast
import builtins
import dataclasses
from numbers import Number
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from representations.database.conversion import models_to_array
from representations.defaults import (
    DEFAULT_REPRESENTATION_EXTENSION,
    REPRESENTATION_CONFIG_FILE,
)
from representations.exceptions import (
    ConfigurationException,
    InvalidArgumentException,
    NotFoundException,
    OutOfBoundsException,
    RepresentationExecutionException,
)
from representations.helpers import value
from representations.logging import getLogger
from representations.support import Config, Finder, Storage

logger = getLogger(__name__)

# Marks "no default given" for get(), None being a valid default
_MISSING = object()


class Representation:
    """
    Data plus a representation file, producing one output value

    Usage:
        rep = Representation.forge('users/show', {'user': user})
        rep.set('include_email', True)
        rep.set({'food': 'bread', 'beverage': 'water'})

        rep.user            # same as rep.get('user')
        rep.locale = 'nl'   # same as rep.set('locale', 'nl')

        payload = rep.output()
    """

    # The representation file extension
    extension: str = DEFAULT_REPRESENTATION_EXTENSION

    @classmethod
    def forge(cls, file: str, data: Any = None, folder: Optional[str] = None) -> 'Representation':
        """
        Returns a new Representation, preferred over calling the constructor

        Args:
            file: Representation name, relative to the representations folder, without extension
            data: Mapping or object whose values are available in the representation
            folder: Representations folder (defaults to the configured one)
        """
        return cls(file, data, folder=folder)

    def __init__(self, file: str, data: Any = None, folder: Optional[str] = None):
        """
        Args:
            file: Representation name, relative to the representations folder, without extension
            data: Mapping or object whose values are available in the representation
            folder: Representations folder (defaults to the configured one)

        Raises:
            InvalidArgumentException: If data is a scalar
            NotFoundException: If the representation file can't be found
        """
        self.data: Dict[str, Any] = {}
        self.file_name: Optional[Path] = None
        self.folder = folder if folder is not None else self._configured_folder()

        if data:
            self.data.update(self._normalize_data(data))

        self.set_filename(file)

    @staticmethod
    def _configured_folder() -> str:
        Config.load(REPRESENTATION_CONFIG_FILE)
        return Config.get(f'{REPRESENTATION_CONFIG_FILE}.representations_folder')

    @staticmethod
    def _normalize_data(data: Any) -> Dict[Any, Any]:
        """
        Turn bulk data into a dict of variables

        Mappings are copied, namedtuples and dataclasses give their fields,
        other objects give their public attributes. A sequence of
        (key, value) pairs becomes those keys, any other sequence is keyed
        by index.

        Raises:
            InvalidArgumentException: If data is a scalar
        """
        if isinstance(data, (str, bytes, bytearray, Number)):
            raise InvalidArgumentException('The data parameter only accepts objects and mappings.')

        if isinstance(data, Mapping):
            return dict(data)

        if isinstance(data, tuple) and hasattr(data, '_asdict'):
            return dict(data._asdict())

        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return {field.name: getattr(data, field.name) for field in dataclasses.fields(data)}

        if isinstance(data, (list, tuple)):
            if all(isinstance(item, (list, tuple)) and len(item) == 2 for item in data):
                return dict(data)
            return dict(enumerate(data))

        attributes = {}
        if hasattr(data, '__dict__'):
            attributes.update(vars(data))
        for klass in type(data).__mro__:
            slots = klass.__dict__.get('__slots__', ())
            for name in (slots,) if isinstance(slots, str) else slots:
                if name not in attributes and hasattr(data, name):
                    attributes[name] = getattr(data, name)

        return {key: val for key, val in attributes.items() if not key.startswith('_')}

    # ====================
    # Resolution
    # ====================

    def set_filename(self, file: str) -> 'Representation':
        """
        Sets the representation file

        Args:
            file: Representation name without extension

        Returns:
            Self

        Raises:
            NotFoundException: If no file matches the name
        """
        path = Finder.search(self.folder, file, f'.{self.extension}')

        if path is None:
            raise NotFoundException(
                f'The requested representation could not be found: {Storage.clean_path(file)}',
                name=file
            )

        logger.debug("Resolved representation %s to %s", file, path)
        self.file_name = path
        return self

    # ====================
    # Data
    # ====================

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Searches for the given variable and returns its value

        If no default is given and the variable doesn't exist an
        OutOfBoundsException is raised. Callable defaults are called.

        Example:
            value = rep.get('foo', 'bar')
            value = rep.get('items', list)
        """
        if key in self.data:
            return self.data[key]

        if default is _MISSING:
            raise OutOfBoundsException(f'Representation variable is not set: {key}', key=key)

        return value(default)

    def set(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> 'Representation':
        """
        Assigns a variable by name, available as a variable in the representation file

        You can also pass a mapping to set several values at once:

            rep.set({'food': 'bread', 'beverage': 'water'})

        Returns:
            Self
        """
        if isinstance(key, Mapping):
            self.data.update(key)
        else:
            self.data[key] = value

        return self

    def has(self, key: str) -> bool:
        """True when the variable is set to something other than None"""
        return self.data.get(key) is not None

    def unset(self, key: str) -> 'Representation':
        """Removes a variable, if set"""
        self.data.pop(key, None)
        return self

    # Attribute and item access sugar over get/set/has/unset

    def __getattr__(self, key: str) -> Any:
        # Only called for names that aren't regular attributes
        if key.startswith('__') or key in ('data', 'file_name', 'folder'):
            raise AttributeError(key)
        try:
            return self.get(key)
        except OutOfBoundsException as e:
            raise AttributeError(str(e)) from None

    def __setattr__(self, key: str, value: Any):
        if key in ('data', 'file_name', 'folder', 'extension'):
            object.__setattr__(self, key, value)
        else:
            self.set(key, value)

    def __delattr__(self, key: str):
        self.unset(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any):
        self.set(key, value)

    def __delitem__(self, key: str):
        self.unset(key)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    # ====================
    # Output
    # ====================

    def output(self) -> Any:
        """
        Runs the representation file and returns its output

        Returns:
            The value of the file's last expression, None if it doesn't end in one

        Raises:
            ConfigurationException: If no representation file is set
            RepresentationExecutionException: If the file fails
        """
        if not self.file_name:
            raise ConfigurationException(
                'You must set the file to use within your representation before outputting'
            )

        return self._process_file()

    def _process_file(self) -> Any:
        """
        Execute the representation file in a clean namespace

        Only builtins and the data variables are visible to the file.
        Variables the file rebinds are written back to data afterwards.
        """
        path = Path(self.file_name)
        namespace = {
            '__builtins__': builtins,
            '__file__': str(path),
            '__name__': f'representations.files.{path.stem}',
        }
        namespace.update(self.data)

        logger.debug("Processing representation %s", path)

        try:
            module, result_expression = self._compile(path)
            exec(module, namespace)
            result = eval(result_expression, namespace) if result_expression is not None else None
        except Exception as e:
            logger.error("Representation %s failed: %s", path, e, exc_info=True)
            raise RepresentationExecutionException(str(e)) from e
        finally:
            for key in list(self.data):
                if key in namespace:
                    self.data[key] = namespace[key]

        return result

    @staticmethod
    def _compile(path: Path):
        """
        Compile the file body and, separately, its trailing expression

        Returns:
            (module code, expression code or None)
        """
        tree = ast.parse(path.read_text(encoding='utf-8'), filename=str(path))

        result_expression = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            expression = ast.Expression(body=tree.body.pop().value)
            result_expression = compile(expression, str(path), 'eval')

        return compile(tree, str(path), 'exec'), result_expression

    # ====================
    # Serialization
    # ====================

    models_to_array = staticmethod(models_to_array)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} file={self.file_name!s} keys={sorted(self.data)}>"
