# src/monkey/environment.py


class Environment:
    """One lexical scope plus a fixed link to its enclosing scope."""

    def __init__(self, outer=None):
        self.store = {}
        self._outer = outer

    @classmethod
    def new_enclosed(cls, outer):
        """Fresh empty scope whose lookups fall back to ``outer``."""
        return cls(outer=outer)

    @property
    def outer(self):
        return self._outer

    # ---- Mapping protocol helpers -------------------------------------------------
    # These view this scope's own bindings only; use get() for chained lookup.

    def __contains__(self, name):
        return name in self.store

    def __getitem__(self, name):
        return self.store[name]

    def __iter__(self):
        return iter(self.store)

    def __len__(self):
        return len(self.store)

    def keys(self):
        return self.store.keys()

    def items(self):
        return self.store.items()

    # ---- Core environment operations ---------------------------------------------

    def get(self, name):
        """Return ``(value, found)``, searching outward through enclosing scopes."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name], True
            env = env._outer
        return None, False

    def set(self, name, value):
        """Bind ``name`` in this scope only; outer bindings are shadowed, never updated."""
        self.store[name] = value
        return value

    def depth(self):
        """Number of enclosing scopes above this one."""
        count = 0
        env = self._outer
        while env is not None:
            count += 1
            env = env._outer
        return count

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, depth={self.depth()})"
