# src/monkey/object.py
from dataclasses import dataclass

from .errors import UnhashableKeyError

INTEGER_OBJ = "INTEGER"
STRING_OBJ = "STRING"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3


def fnv1a_64(data: bytes) -> int:
    """64-bit FNV-1a digest of ``data``."""
    h = _FNV64_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV64_PRIME) & _UINT64_MASK
    return h


@dataclass(frozen=True)
class HashKey:
    type: str
    value: int


class Object:
    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __str__(self):
        return self.inspect()


class Hashable:
    """Mixin for the kinds that may key a Hash (Integer, String, Boolean)."""

    def hash_key(self) -> HashKey:
        raise NotImplementedError("Subclasses must implement this method")


def is_hashable(obj) -> bool:
    return isinstance(obj, Hashable)


class Integer(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ
    def hash_key(self): return HashKey(INTEGER_OBJ, self.value & _UINT64_MASK)
    def __repr__(self): return f"Integer({self.value})"


class String(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def hash_key(self): return HashKey(STRING_OBJ, fnv1a_64(self.value.encode("utf-8", "surrogatepass")))
    def __repr__(self): return f"String({self.value!r})"


class Boolean(Object, Hashable):
    """Interned: ``Boolean(True) is Boolean(True)`` always holds."""

    _instances = {}

    def __new__(cls, value):
        value = bool(value)
        instance = cls._instances.get(value)
        if instance is None:
            instance = super().__new__(cls)
            instance.value = value
            cls._instances[value] = instance
        return instance

    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ
    def hash_key(self): return HashKey(BOOLEAN_OBJ, 1 if self.value else 0)
    def __repr__(self): return f"Boolean({self.value})"


class Null(Object):
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def inspect(self): return "null"
    def type(self): return NULL_OBJ
    def __repr__(self): return "Null"


# Process-wide singletons; equality on these is identity.
TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ
    def __repr__(self): return f"ReturnValue({self.value!r})"


class EvaluationError(Object):
    """The Error variant: a failed evaluation, carried as a value."""

    def __init__(self, message):
        self.message = message

    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ
    def __repr__(self): return f"EvaluationError({self.message!r})"


class Function(Object):
    """A closure. ``env`` is the defining Environment, shared rather than copied."""

    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = parameters, body, env

    def inspect(self):
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {{\n{self.body}\n}}"

    def type(self): return FUNCTION_OBJ


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # Stores the native Python function
        self.name = name

    def __call__(self, *args):
        return self.fn(*args)

    def inspect(self):
        return f"<built-in function: {self.name}>"

    def type(self):
        return BUILTIN_OBJ


class Array(Object):
    def __init__(self, elements=None): self.elements = list(elements or [])
    def inspect(self):
        elements_str = ", ".join(el.inspect() for el in self.elements)
        return f"[{elements_str}]"
    def type(self): return ARRAY_OBJ


@dataclass
class HashPair:
    key: Object
    value: Object


class Hash(Object):
    def __init__(self, pairs=None):
        self.pairs = dict(pairs or {})  # HashKey -> HashPair

    def type(self): return HASH_OBJ

    def inspect(self):
        pairs = [f"{p.key.inspect()}: {p.value.inspect()}" for p in self.pairs.values()]
        return "{" + ", ".join(pairs) + "}"

    @staticmethod
    def key_for(key):
        if not is_hashable(key):
            raise UnhashableKeyError(key)
        return key.hash_key()

    def put(self, key, value):
        self.pairs[self.key_for(key)] = HashPair(key, value)
        return value

    def get(self, key, default=None):
        pair = self.pairs.get(self.key_for(key))
        return pair.value if pair is not None else default

    def __contains__(self, key):
        return is_hashable(key) and key.hash_key() in self.pairs

    def __len__(self):
        return len(self.pairs)
